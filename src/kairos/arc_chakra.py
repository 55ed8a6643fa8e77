"""
Arc and chakra lookups for theming.

Pure table lookups over decomposed calendar fields. Clients have assigned
a chakra to a day in more than one way; each policy has its own
function and none of them is the default.
"""

from __future__ import annotations

import math

from kairos.constants import BEATS_PER_ARC, DAYS_PER_WEEK, NUM_ARCS
from kairos.errors import KairosInputError
from kairos.guards import to_exact
from kairos.numerics import clamp_value, euclid_mod
from kairos.types import (
    ARC_DESCRIPTIONS,
    ARC_NAMES,
    CHAKRA_NAMES,
    MONTH_NAMES,
    WEEK_TITLES,
    Arc,
    Chakra,
    Weekday,
)

ARC_TO_CHAKRA: dict[Arc, Chakra] = {
    "Ignite": "Root",
    "Integrate": "Sacral",
    "Harmonize": "Solar Plexus",
    "Reflekt": "Heart",
    "Purify": "Throat",
    "Dream": "Third Eye",
}

# Six weekdays onto seven chakras: Third Eye is never assigned
WEEKDAY_TO_CHAKRA: dict[Weekday, Chakra] = {
    "Solhara": "Root",
    "Aquaris": "Sacral",
    "Flamora": "Solar Plexus",
    "Verdari": "Heart",
    "Sonari": "Throat",
    "Kaelith": "Crown",
}


def arc_from_beat(beat: int) -> Arc:
    """Arc containing ``beat`` (0..35); out-of-range beats clamp to the end arcs."""
    beat = math.floor(to_exact(beat, field="beat"))
    return ARC_NAMES[clamp_value(beat // BEATS_PER_ARC, 0, NUM_ARCS - 1)]


def arc_to_chakra(arc: Arc) -> Chakra:
    try:
        return ARC_TO_CHAKRA[arc]
    except KeyError:
        raise KairosInputError(f"Unknown arc: {arc!r}") from None


def arc_description(arc: Arc) -> str:
    try:
        return ARC_DESCRIPTIONS[arc]
    except KeyError:
        raise KairosInputError(f"Unknown arc: {arc!r}") from None


def chakra_day_from_day_of_month(day_of_month: int) -> Chakra:
    """Day-of-month policy: seven bands of six days (days 1-6 Root ... 37-42 Crown)."""
    return CHAKRA_NAMES[clamp_value((max(1, day_of_month) - 1) // DAYS_PER_WEEK, 0, 6)]


def chakra_day_from_weekday(weekday: Weekday) -> Chakra:
    """Weekday policy: fixed 6-entry table (Kaelith maps to Crown)."""
    try:
        return WEEKDAY_TO_CHAKRA[weekday]
    except KeyError:
        raise KairosInputError(f"Unknown weekday: {weekday!r}") from None


def chakra_day_from_month(month: int) -> Chakra:
    """Month policy: chakras cycle over months 1..8, so month 8 wraps to Root."""
    return CHAKRA_NAMES[euclid_mod(max(1, month) - 1, len(CHAKRA_NAMES))]


def month_name(month: int) -> str:
    """Name of ``month`` (1..8)."""
    if not 1 <= month <= len(MONTH_NAMES):
        raise KairosInputError(f"month must be in 1..{len(MONTH_NAMES)}, got {month}")
    return MONTH_NAMES[month - 1]


def week_index(day_of_month: int) -> int:
    """Week within the month (0..6) for ``day_of_month`` (1..42)."""
    return clamp_value((max(1, day_of_month) - 1) // DAYS_PER_WEEK, 0, len(WEEK_TITLES) - 1)


def week_title(day_of_month: int) -> str:
    return WEEK_TITLES[week_index(day_of_month)]
