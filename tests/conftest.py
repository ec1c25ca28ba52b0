"""Pytest configuration for gettextengine test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import pytest
from hypothesis import Phase, Verbosity, settings

from gettextengine import DiagnosticCollector, Gettext, GettextConfig

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def latin13() -> dict[str, Any]:
    """gettext-parser-shaped catalog with plural, context and comment entries."""
    with (FIXTURES_DIR / "latin13.json").open(encoding="utf-8") as fileobj:
        data: dict[str, Any] = json.load(fileobj)
    return data


@pytest.fixture
def gt() -> Gettext:
    """Fresh session with debug mirroring off."""
    return Gettext(GettextConfig(debug=False))


@pytest.fixture
def loaded_gt(gt: Gettext, latin13: dict[str, Any]) -> Gettext:
    """Session with latin13 loaded as et-EE/messages and et-EE selected."""
    gt.add_translations("et-EE", "messages", latin13)
    gt.set_locale("et-EE")
    return gt


@pytest.fixture
def collector(gt: Gettext) -> DiagnosticCollector:
    """Collector registered for every diagnostic on the gt fixture."""
    diagnostics = DiagnosticCollector()
    gt.on("*", diagnostics)
    return diagnostics
