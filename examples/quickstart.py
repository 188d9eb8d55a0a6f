"""Quickstart example for nordlocale.

Demonstrates message loading, fallback, plurals, and Norwegian formatting
with an explicitly constructed I18nManager.

Note: Examples print diagnostics to show what the engine reports on misses.
In production, route on_diagnostic to your logging or monitoring instead.
"""

import asyncio
from datetime import date

from nordlocale import Diagnostic, I18nManager

NB_NO = {
    "common": {"save": "Lagre", "cancel": "Avbryt"},
    "booking": {
        "create": {"title": "Opprett ny reservasjon"},
        "count": {"one": "{{count}} reservasjon", "other": "{{count}} reservasjoner"},
    },
    "greeting": "Hei, {{name}}!",
}

EN = {
    "common": {"save": "Save", "cancel": "Cancel", "delete": "Delete"},
    "booking": {
        "create": {"title": "Create new booking"},
        "count": {"one": "{{count}} booking", "other": "{{count}} bookings"},
    },
    "greeting": "Hello, {{name}}!",
}


def report(diagnostic: Diagnostic) -> None:
    print(f"  [{diagnostic.code.name}] {diagnostic}")


i18n = I18nManager(on_diagnostic=report)
asyncio.run(i18n.load_messages("nb-NO", NB_NO))
asyncio.run(i18n.load_messages("en", EN))

# Example 1: Dotted keys
print("=" * 50)
print("Example 1: Dotted Keys")
print("=" * 50)

print(i18n.t("booking.create.title"))
# Output: Opprett ny reservasjon

print(i18n.t("booking.create.title", locale="en"))
# Output: Create new booking

# Example 2: Fallback and misses
print("\n" + "=" * 50)
print("Example 2: Fallback and Misses")
print("=" * 50)

print(i18n.t("common.delete"))
# Output: Delete (resolved from en, MESSAGE_FALLBACK reported)

print(i18n.t("common.archive"))
# Output: common.archive (MESSAGE_NOT_FOUND reported)

# Example 3: Interpolation and plurals
print("\n" + "=" * 50)
print("Example 3: Interpolation and Plurals")
print("=" * 50)

print(i18n.t("greeting", {"name": "Kari"}))
# Output: Hei, Kari!

for count in (0, 1, 2, 25):
    print(i18n.tp("booking.count", count))
# Output: 0 reservasjoner / 1 reservasjon / 2 reservasjoner / 25 reservasjoner

# Example 4: Formatting
print("\n" + "=" * 50)
print("Example 4: Formatting")
print("=" * 50)

print(i18n.format_date(date(2025, 1, 15)))
# Output: 15.01.2025

print(i18n.format_number(1234567.891))
# Output: 1 234 567,89

print(i18n.format_currency(1500))
# Output: 1 500,00 kr

print(i18n.format_norwegian_person_number("12345678901"))
# Output: 123456 78901

print(i18n.format_norwegian_organization_number("123456789"))
# Output: 123 456 789

# Example 5: Switching locale
print("\n" + "=" * 50)
print("Example 5: Switching Locale")
print("=" * 50)

i18n.set_locale("de-DE")
# MESSAGE: LOCALE_NOT_REGISTERED reported, en selected
print(i18n.get_current_locale())
# Output: en

print(i18n.get_stats())
