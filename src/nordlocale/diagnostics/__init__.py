"""Diagnostics: structured miss reporting and exception types.

Exports:
    Diagnostic, DiagnosticCode, DiagnosticSink - structured miss records
    DiagnosticReporter - logging + sink delivery
    NordLocaleError, ConfigurationError, CatalogError - programming errors
    FormattingError - internal Babel failure carrying a fallback value

Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode, DiagnosticSink
from .errors import CatalogError, ConfigurationError, FormattingError, NordLocaleError
from .reporter import DiagnosticReporter

__all__ = [
    "CatalogError",
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticReporter",
    "DiagnosticSink",
    "FormattingError",
    "NordLocaleError",
]
