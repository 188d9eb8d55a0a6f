"""Pytest configuration for the nordlocale test suite.

Hypothesis runs 200 examples locally and 50 derandomized examples when
CI=true. HYPOTHESIS_PROFILE=dev|ci overrides the detection.
"""

from __future__ import annotations

import os

import pytest
from hypothesis import settings

from nordlocale import Diagnostic, I18nManager

settings.register_profile("dev", max_examples=200)
settings.register_profile("ci", max_examples=50, derandomize=True)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci"):
        return explicit
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())


@pytest.fixture
def diagnostics() -> list[Diagnostic]:
    """Collected diagnostics from the i18n fixture's sink."""
    return []


@pytest.fixture
def i18n(diagnostics: list[Diagnostic]) -> I18nManager:
    """Fresh engine with default options and a recording diagnostic sink."""
    return I18nManager(on_diagnostic=diagnostics.append)

