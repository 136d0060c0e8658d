"""Close-match hints for mistyped command and channel names."""

from __future__ import annotations

import difflib
from typing import Iterable


def did_you_mean(
    value: str,
    choices: Iterable[str],
    *,
    limit: int = 3,
    cutoff: float = 0.6,
) -> str | None:
    """Return a "Did you mean" hint for ``value``, or None without close matches."""
    candidates = [c for c in choices if isinstance(c, str) and c]
    if not value or not candidates:
        return None
    matches = difflib.get_close_matches(value, candidates, n=limit, cutoff=cutoff)
    if not matches:
        return None
    if len(matches) == 1:
        return f"Did you mean: {matches[0]}"
    return f"Did you mean one of: {', '.join(matches)}"
