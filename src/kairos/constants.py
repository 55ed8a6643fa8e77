#!/usr/bin/env python3
"""
Centralized Kairos constants
Interop values shared with every client that decodes pulse numbers - DO NOT MODIFY
"""

import math

from fractions import Fraction

from kairos.numerics import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER, round_half_even

# ============================================================================
# GENESIS ANCHOR
# ============================================================================
# 2024-05-10T06:45:41.888Z in Unix milliseconds
GENESIS_MS = 1_715_323_541_888

# ============================================================================
# BREATH (PULSE) DURATION
# ============================================================================
# One pulse lasts 3 + sqrt(5) seconds. The float forms are for display and
# coarse scheduling only; exact arithmetic uses the rationals below.
BREATH_SECONDS = 3 + math.sqrt(5)
BREATH_MS_ROUNDED = round(BREATH_SECONDS * 1000)  # 5236

# (3 + sqrt(5)) * 1000 ms per pulse, 60 decimal digits
MS_PER_PULSE_NUM = int("5236067977499789696409173668731276235440618359611525724270897245")
MS_PER_PULSE_DEN = 10**60

# 1000 / (3 + sqrt(5)) micro-pulses per ms, 60 decimal digits
MICRO_PER_MS_NUM = int("190983005625052575897706582817180941139845410097118568932275689")
MICRO_PER_MS_DEN = 10**60

MS_PER_PULSE = Fraction(MS_PER_PULSE_NUM, MS_PER_PULSE_DEN)
MICRO_PER_MS = Fraction(MICRO_PER_MS_NUM, MICRO_PER_MS_DEN)

# ============================================================================
# LATTICE (DAY / BEAT / STEP)
# ============================================================================
MICRO_PER_PULSE = 1_000_000

# Continuous day: 17,491.270421 pulses, scaled by 1e6 and rounded once
MICRO_PER_DAY = 17_491_270_421

BEATS_PER_DAY = 36
STEPS_PER_BEAT = 44
PULSES_PER_STEP = 11

MICRO_PER_STEP = PULSES_PER_STEP * MICRO_PER_PULSE  # 11,000,000

# Derived once; a beat is ~44.17 steps long on the continuous day
MICRO_PER_BEAT = round_half_even(Fraction(MICRO_PER_DAY + BEATS_PER_DAY // 2, BEATS_PER_DAY))

# ============================================================================
# CALENDAR
# ============================================================================
DAYS_PER_WEEK = 6
WEEKS_PER_MONTH = 7
DAYS_PER_MONTH = DAYS_PER_WEEK * WEEKS_PER_MONTH  # 42
MONTHS_PER_YEAR = 8
DAYS_PER_YEAR = DAYS_PER_MONTH * MONTHS_PER_YEAR  # 336

BEATS_PER_ARC = 6
NUM_ARCS = BEATS_PER_DAY // BEATS_PER_ARC  # 6

# ============================================================================
# LEGACY INTEGER GRID (surfaced, never used for day boundaries)
# ============================================================================
GRID_PULSES_PER_DAY = BEATS_PER_DAY * STEPS_PER_BEAT * PULSES_PER_STEP  # 17,424
GRID_MICRO_PER_DAY = GRID_PULSES_PER_DAY * MICRO_PER_PULSE

DAY_LENGTH_POLICY = "continuous"

__all__ = [
    "BEATS_PER_ARC",
    "BEATS_PER_DAY",
    "BREATH_MS_ROUNDED",
    "BREATH_SECONDS",
    "DAYS_PER_MONTH",
    "DAYS_PER_WEEK",
    "DAYS_PER_YEAR",
    "DAY_LENGTH_POLICY",
    "GENESIS_MS",
    "GRID_MICRO_PER_DAY",
    "GRID_PULSES_PER_DAY",
    "MAX_SAFE_INTEGER",
    "MICRO_PER_BEAT",
    "MICRO_PER_DAY",
    "MICRO_PER_MS",
    "MICRO_PER_MS_DEN",
    "MICRO_PER_MS_NUM",
    "MICRO_PER_PULSE",
    "MICRO_PER_STEP",
    "MIN_SAFE_INTEGER",
    "MONTHS_PER_YEAR",
    "MS_PER_PULSE",
    "MS_PER_PULSE_DEN",
    "MS_PER_PULSE_NUM",
    "NUM_ARCS",
    "PULSES_PER_STEP",
    "STEPS_PER_BEAT",
    "WEEKS_PER_MONTH",
]

# Validate lattice against the published values
assert MICRO_PER_BEAT == 485_868_623, "MICRO_PER_BEAT must match published clients"
assert MICRO_PER_BEAT * (BEATS_PER_DAY - 1) < MICRO_PER_DAY <= MICRO_PER_BEAT * BEATS_PER_DAY
assert DAYS_PER_YEAR == 336 and GRID_PULSES_PER_DAY == 17_424
