# -*- coding: utf-8 -*-
"""Mood statistics — pure reduction over a session's mood entries.

Ties are always broken by first appearance in the input order; ``Counter``
keeps insertion order and ``most_common`` sorts stably.
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Any, Iterable, List, Mapping, Optional

from .models import MoodStatsSummary

TOP_N = 5


def _round_one_decimal(value: float) -> float:
    # Half-up on the scaled value, not banker's rounding.
    return math.floor(value * 10 + 0.5) / 10


def _top(values: Iterable[str], n: int = TOP_N) -> List[str]:
    return [value for value, _ in Counter(values).most_common(n)]


def compute_mood_stats(entries: Iterable[Mapping[str, Any]]) -> Optional[MoodStatsSummary]:
    """Summarize mood entries; ``None`` means there is no data yet."""
    items = list(entries)
    if not items:
        return None

    avg_intensity = sum(float(e["intensity"]) for e in items) / len(items)
    most_common_mood = Counter(str(e["mood"]) for e in items).most_common(1)[0][0]

    triggers = [t for e in items for t in (e.get("triggers") or [])]
    activities = [a for e in items for a in (e.get("activities") or [])]

    return MoodStatsSummary(
        total_entries=len(items),
        avg_intensity=_round_one_decimal(avg_intensity),
        most_common_mood=most_common_mood,
        common_triggers=_top(triggers),
        helpful_activities=_top(activities),
    )
