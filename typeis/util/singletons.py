"""Registry of reset hooks for process-wide instances.

Module-level singletons (settings, the default classifier) register a
reset function here so tests can return them to a pristine state.
"""

from __future__ import annotations

from collections.abc import Callable

_reset_fns: list[Callable[[], None]] = []


def register_singleton(reset_fn: Callable[[], None]) -> None:
    """Register *reset_fn*; registering the same function twice is a no-op."""
    if reset_fn not in _reset_fns:
        _reset_fns.append(reset_fn)


def reset_all_singletons() -> None:
    """Run every reset hook in registration order -- test isolation only."""
    for fn in _reset_fns:
        fn()
