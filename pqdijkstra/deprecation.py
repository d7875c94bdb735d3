"""Helpers for emitting one-time deprecation warnings."""

from __future__ import annotations

import warnings
from typing import Set, Tuple

_warned: Set[Tuple[str, str, str]] = set()


def warn_once(message: str, *, since: str, remove_in: str) -> None:
    """Issue a :class:`DeprecationWarning` for ``message`` once per process.

    Args:
        message: Text naming the deprecated API and its replacement.
        since: Version in which the deprecation was introduced.
        remove_in: Version in which the deprecated name will be removed.
    """
    key = (message, since, remove_in)
    if key in _warned:
        return
    _warned.add(key)
    # stacklevel 3: caller of the deprecated alias, not the alias itself
    warnings.warn(
        f"{message} (deprecated since {since}; will be removed in {remove_in})",
        DeprecationWarning,
        stacklevel=3,
    )


def _reset() -> None:
    """Forget previously issued warnings. Only meant for tests."""
    _warned.clear()
