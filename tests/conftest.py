"""Pytest configuration for the vget test suite.

Hypothesis profiles (single source of truth for max_examples):
- dev: Local development, 200 examples
- ci: CI runs, 50 derandomized examples
- verbose: Debug mode with progress output, 100 examples

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz generate large random templates and are
skipped unless requested with ``pytest -m fuzz`` or by naming the fuzz module.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from vget.plugins.v_get import VGetTransform
from vget.syntax.builders import Builders, builders

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=200, phases=_PHASES, derandomize=False)
settings.register_profile(
    "ci", max_examples=50, phases=_PHASES, derandomize=True, print_blob=True
)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=_PHASES,
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Pick the Hypothesis profile for this run.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. "dev"
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def b() -> Builders:
    """Shared node builders, named like the host's ``b`` convention."""
    return builders


@pytest.fixture
def vget_transform() -> VGetTransform:
    """Transform with default configuration."""
    return VGetTransform()


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless explicitly requested.

    Behavior:
    - Normal test run (pytest tests/): fuzz tests are SKIPPED
    - Explicit fuzz run (pytest -m fuzz): fuzz tests run
    - Fuzz module named on the command line: runs as specified
    """
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    for arg in config.invocation_params.args:
        if "test_plugin_v_get_fuzz" in str(arg):
            return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
