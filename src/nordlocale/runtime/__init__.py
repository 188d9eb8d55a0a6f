"""Runtime: plural selection, interpolation, and locale-aware formatting.

Submodules:
    plural_rules   - select_plural_form, plural_key
    interpolation  - interpolate
    locale_context - LocaleContext (Babel date/number/currency formatting)
    identifiers    - Norwegian person and organization number display

Python 3.13+.
"""

from .identifiers import format_norwegian_organization_number, format_norwegian_person_number
from .interpolation import interpolate
from .locale_context import LocaleContext, build_number_pattern
from .plural_rules import PLURAL_LANGUAGES, plural_key, select_plural_form

__all__ = [
    "PLURAL_LANGUAGES",
    "LocaleContext",
    "build_number_pattern",
    "format_norwegian_organization_number",
    "format_norwegian_person_number",
    "interpolate",
    "plural_key",
    "select_plural_form",
]
