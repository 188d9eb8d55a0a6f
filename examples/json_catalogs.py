"""JSON Catalog Loading Example - MessageLoader Protocol.

Demonstrates feeding I18nManager.load_locale() from JSON files on disk.
The engine never reads files itself; any object with an async
load(locale) method can act as the loader.

Scenarios covered:
1. Loading catalogs from a directory of <locale>.json files
2. Handling a missing catalog (NOT_FOUND)
3. Handling a corrupt catalog (ERROR)

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import json
import tempfile
from pathlib import Path
from typing import Any

from nordlocale import I18nManager, LoadStatus


class JsonDirectoryLoader:
    """Load <locale>.json from a base directory."""

    def __init__(self, base_path: Path) -> None:
        self.base_path = base_path

    async def load(self, locale: str) -> dict[str, Any]:
        path = self.base_path / f"{locale}.json"
        text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        return json.loads(text)


async def main() -> None:
    with tempfile.TemporaryDirectory() as tmpdir:
        base = Path(tmpdir)
        (base / "nb-NO.json").write_text(
            json.dumps({"nav": {"home": "Hjem", "settings": "Innstillinger"}}),
            encoding="utf-8",
        )
        (base / "en.json").write_text(
            json.dumps({"nav": {"home": "Home", "settings": "Settings", "help": "Help"}}),
            encoding="utf-8",
        )
        (base / "nn-NO.json").write_text("{not json", encoding="utf-8")

        i18n = I18nManager(message_loader=JsonDirectoryLoader(base))

        # Example 1: Successful loads
        print("=" * 60)
        print("Example 1: Loading Catalogs")
        print("=" * 60)
        for locale in ("nb-NO", "en"):
            result = await i18n.load_locale(locale)
            print(f"{locale}: {result.status} ({result.message_count} messages)")
        print(i18n.t("nav.settings"))
        # Output: Innstillinger
        print(i18n.t("nav.help"))
        # Output: Help

        # Example 2: Missing and corrupt catalogs
        print("\n" + "=" * 60)
        print("Example 2: Load Failures")
        print("=" * 60)
        for locale in ("sv-SE", "nn-NO"):
            result = await i18n.load_locale(locale)
            if result.status != LoadStatus.SUCCESS:
                print(f"{locale}: {result.status} - {type(result.error).__name__}")
        # Output: sv-SE: not_found - FileNotFoundError
        # Output: nn-NO: error - JSONDecodeError

        print(i18n.get_message_keys("en"))


if __name__ == "__main__":
    asyncio.run(main())
