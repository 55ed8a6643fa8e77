"""
Kairos Type Definitions
Name tables for weekdays, arcs, chakras and months
"""
from typing import Literal

Weekday = Literal["Solhara", "Aquaris", "Flamora", "Verdari", "Sonari", "Kaelith"]
Arc = Literal["Ignite", "Integrate", "Harmonize", "Reflekt", "Purify", "Dream"]
Chakra = Literal["Root", "Sacral", "Solar Plexus", "Heart", "Throat", "Third Eye", "Crown"]

# Cyclic weekday sequence; index 0 is the genesis day
WEEKDAY_NAMES: tuple[Weekday, ...] = ("Solhara", "Aquaris", "Flamora", "Verdari", "Sonari", "Kaelith")

# Six arcs of six beats each
ARC_NAMES: tuple[Arc, ...] = ("Ignite", "Integrate", "Harmonize", "Reflekt", "Purify", "Dream")

CHAKRA_NAMES: tuple[Chakra, ...] = (
    "Root",
    "Sacral",
    "Solar Plexus",
    "Heart",
    "Throat",
    "Third Eye",
    "Crown",
)

MONTH_NAMES = ("Aethon", "Virelai", "Solari", "Amarin", "Kaelus", "Umbriel", "Noktura", "Liora")

# Titles of the seven 6-day weeks inside a month
WEEK_TITLES = (
    "Awakening Flame",
    "Flowing Heart",
    "Radiant Will",
    "Harmonic Voh",
    "Inner Mirror",
    "Dreamfire Memory",
    "Krowned Light",
)

ARC_DESCRIPTIONS: dict[Arc, str] = {
    "Ignite": "Resurrection, will, awakening",
    "Integrate": "Emotional grounding, emergence",
    "Harmonize": "Radiance, balance, coherent action",
    "Reflekt": "Union, compassion, spoken resonance",
    "Purify": "Truth, remembrance, etheric light",
    "Dream": "Divine memory, lucid integration, dreaming awake",
}

# Validate tables match the calendar lattice
assert len(WEEKDAY_NAMES) == 6, "Must have exactly 6 weekdays"
assert len(ARC_NAMES) == 6, "Must have exactly 6 arcs"
assert len(CHAKRA_NAMES) == 7, "Must have exactly 7 chakras"
assert len(MONTH_NAMES) == 8, "Must have exactly 8 months"
assert len(WEEK_TITLES) == 7, "Must have exactly 7 weeks per month"
assert set(ARC_DESCRIPTIONS) == set(ARC_NAMES), "Every arc needs a description"
