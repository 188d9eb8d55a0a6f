"""Parameter interpolation for resolved message strings.

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Mapping
from typing import Any

__all__ = ["interpolate"]

_TOKEN = re.compile(r"\{\{(\w+)\}\}")


def interpolate(template: str, params: Mapping[str, Any]) -> str:
    """Replace {{name}} tokens with str(params[name]).

    Tokens whose name is absent from params, or maps to None, stay in the
    output verbatim. Substitution is a single pass: substituted values are
    never scanned for further tokens.

    Examples:
        >>> interpolate("Hei, {{name}}!", {"name": "Kari"})
        'Hei, Kari!'
        >>> interpolate("{{x}}", {})
        '{{x}}'
        >>> interpolate("{{a}}", {"a": "{{b}}", "b": "nope"})
        '{{b}}'
    """

    def substitute(match: re.Match[str]) -> str:
        value = params.get(match.group(1))
        if value is None:
            return match.group(0)
        return str(value)

    return _TOKEN.sub(substitute, template)
