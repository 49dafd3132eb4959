"""
Root conftest.py for the mock-responder test suite.

Pytest plugin that checks TRA (Test Responsibility Architecture) and Tier markers.
- Reports tests missing a TRA anchor or a tier marker
- Applies tier timeouts when pytest-timeout is installed
- Uses enforcement='warn' by default (no collection failures)

Usage:
    @pytest.mark.tier(1)
    @pytest.mark.tra("UseCase.MockResponder.Dispatch")
    def test_something():
        ...

Configuration:
    Set TRA_ENFORCE=1 to fail collection on marker errors
    Set TRA_ENFORCE=0 to skip the check entirely
    Set TIER_TIMEOUT_MULTIPLIER to scale tier timeouts on slow machines
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.nodes import Item


# ============================================================================
# TRA (Test Responsibility Architecture) Configuration
# ============================================================================

VALID_TRA_PREFIXES = frozenset(
    [
        "Domain.Invariant.",
        "Domain.Policy.",
        "UseCase.",
        "Port.",
        "Adapter.",
        "Contract.",
        "Plugin.",
    ]
)


# ============================================================================
# Tier Configuration
# ============================================================================

# Tier timeout limits in seconds
TIER_TIMEOUTS: dict[int, float] = {
    0: 0.1,  # 100ms - instant
    1: 2.0,  # 2s - fast (pre-commit)
    2: 30.0,  # 30s - standard (CI)
}


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config: Config) -> None:
    """Register custom markers for TRA and Tier checks."""
    config.addinivalue_line(
        "markers",
        "tra(anchor): Test Responsibility Anchor - declares the single responsibility this test protects. "
        "Must start with one of: Domain.Invariant, Domain.Policy, UseCase, Port, Adapter, Contract, Plugin",
    )
    config.addinivalue_line(
        "markers",
        "tier(level): Test tier (0=instant, 1=fast, 2=standard). "
        "Determines when test runs and enforces timeout.",
    )
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line(
        "markers", "property: Property-based tests using Hypothesis"
    )
    config.addinivalue_line("markers", "concurrency: Concurrency tests with threading")
    config.addinivalue_line(
        "markers",
        "no_parallel: Tests that cannot run in parallel (shared state/threads)",
    )


def _get_tier(item: Item) -> int | None:
    """Extract tier level from item's markers."""
    for marker in item.iter_markers(name="tier"):
        if marker.args:
            tier = marker.args[0]
            if isinstance(tier, int) and tier in TIER_TIMEOUTS:
                return tier
    return None


def _check_markers(items: list[Item]) -> list[str]:
    """
    Validate TRA and tier markers on all tests.

    Returns:
        List of error messages. Empty if all valid.
    """
    errors = []

    for item in items:
        test_id = item.nodeid
        tra_markers = list(item.iter_markers(name="tra"))

        if not tra_markers:
            errors.append(f"{test_id}: Missing @pytest.mark.tra('...')")
        elif len(tra_markers) > 1:
            errors.append(f"{test_id}: Multiple @tra markers found")
        else:
            anchor = tra_markers[0].args[0] if tra_markers[0].args else None
            if not isinstance(anchor, str) or not anchor.strip():
                errors.append(f"{test_id}: @tra anchor must be a non-empty string")
            elif not any(anchor.startswith(prefix) for prefix in VALID_TRA_PREFIXES):
                valid = ", ".join(sorted(VALID_TRA_PREFIXES))
                errors.append(
                    f"{test_id}: Invalid TRA anchor '{anchor}'. Must start with one of: {valid}"
                )

        if _get_tier(item) is None:
            errors.append(f"{test_id}: Missing or invalid @pytest.mark.tier()")

    return errors


def _apply_tier_timeouts(items: list[Item]) -> None:
    """Apply timeout based on tier level.

    Only applies if pytest-timeout is installed and no explicit timeout is set.
    """
    try:
        import pytest_timeout as _  # type: ignore[import-untyped]  # noqa: F401
    except ImportError:
        # pytest-timeout not installed, skip
        return

    multiplier = float(os.environ.get("TIER_TIMEOUT_MULTIPLIER", "1.0"))

    for item in items:
        tier = _get_tier(item)
        if tier is None or any(item.iter_markers(name="timeout")):
            continue
        item.add_marker(pytest.mark.timeout(TIER_TIMEOUTS[tier] * multiplier))


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config: Config, items: list[Item]) -> None:
    """Check TRA and Tier markers at collection time."""
    enforce_mode = os.environ.get("TRA_ENFORCE", "warn")
    if enforce_mode != "0":
        errors = _check_markers(items)
        if errors and enforce_mode == "warn":
            print("\nTRA/Tier marker warnings:")
            for error in errors:
                print(f"  {error}")
        elif errors:
            pytest.fail(
                "TRA/Tier marker errors:\n" + "\n".join(f"  - {e}" for e in errors),
                pytrace=False,
            )

    _apply_tier_timeouts(items)


@pytest.hookimpl(trylast=True)
def pytest_report_header(config: Config) -> str:
    """Add enforcement info to pytest header."""
    return f"TRA/Tier enforcement: {os.environ.get('TRA_ENFORCE', 'warn')}"
