"""Diagnostic delivery to the logging module and an injectable sink.

Python 3.13+.
"""

import logging

from nordlocale.diagnostics.codes import Diagnostic, DiagnosticSink
from nordlocale.enums import Severity

__all__ = ["DiagnosticReporter"]

logger = logging.getLogger(__name__)


class DiagnosticReporter:
    """Emit diagnostics to the module logger and an optional sink.

    WARNING diagnostics are logged at WARNING level and INFO diagnostics at
    DEBUG level. The sink receives every diagnostic regardless of logger
    configuration, so tests can assert on misses without capturing output.

    A sink that raises must not break translation lookups: its exception is
    logged and suppressed.

    Example:
        >>> from nordlocale.diagnostics import DiagnosticCode
        >>> seen = []
        >>> reporter = DiagnosticReporter(seen.append)
        >>> reporter.emit(Diagnostic(DiagnosticCode.MESSAGE_NOT_FOUND, "missing"))
        >>> seen[0].code
        <DiagnosticCode.MESSAGE_NOT_FOUND: 2001>
    """

    __slots__ = ("_sink",)

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        self._sink = sink

    @property
    def sink(self) -> DiagnosticSink | None:
        """Get the injected sink (None if diagnostics are only logged)."""
        return self._sink

    def emit(self, diagnostic: Diagnostic) -> None:
        """Log diagnostic and forward it to the sink."""
        level = logging.WARNING if diagnostic.severity is Severity.WARNING else logging.DEBUG
        logger.log(level, "[%s] %s", diagnostic.code.name, diagnostic.message)

        if self._sink is None:
            return
        try:
            self._sink(diagnostic)
        except Exception:
            logger.exception("Diagnostic sink failed for %s", diagnostic.code.name)
