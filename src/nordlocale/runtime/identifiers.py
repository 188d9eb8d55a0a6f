"""Display formatting for Norwegian national identifiers.

These are pure string-slicing transforms: they group digits for display
and perform no checksum (mod 11) validation. Input of the wrong length is
returned unchanged.

Python 3.13+. Zero external dependencies.
"""

from nordlocale.constants import ORGANIZATION_NUMBER_LENGTH, PERSON_NUMBER_LENGTH

__all__ = [
    "format_norwegian_organization_number",
    "format_norwegian_person_number",
]


def format_norwegian_person_number(person_number: str) -> str:
    """Format an 11-character fødselsnummer as "DDMMYY NNNNN".

    Examples:
        >>> format_norwegian_person_number("12345678901")
        '123456 78901'
        >>> format_norwegian_person_number("1234")
        '1234'
    """
    if len(person_number) != PERSON_NUMBER_LENGTH:
        return person_number
    return f"{person_number[:6]} {person_number[6:]}"


def format_norwegian_organization_number(organization_number: str) -> str:
    """Format a 9-character organisasjonsnummer as "NNN NNN NNN".

    Examples:
        >>> format_norwegian_organization_number("123456789")
        '123 456 789'
        >>> format_norwegian_organization_number("12345678")
        '12345678'
    """
    if len(organization_number) != ORGANIZATION_NUMBER_LENGTH:
        return organization_number
    return (
        f"{organization_number[:3]} {organization_number[3:6]} {organization_number[6:]}"
    )
