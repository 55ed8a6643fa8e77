#!/usr/bin/env python3
"""
Exception hierarchy for the Kairos engine.

Well-formed numeric input never raises. These exist for inputs of the wrong
shape and for internal range checks that indicate a defect.
"""


class KairosError(Exception):
    """Base class for all Kairos engine errors"""


class KairosInputError(KairosError, ValueError):
    """Input has the wrong type or lies outside a calendar coordinate range"""


class KairosInvariantError(KairosError, ArithmeticError):
    """A derived index fell outside the band the engine tolerates

    Raised by range-checked clamps when a raw value is more than one unit
    outside its valid range. This is never expected on valid constants.
    """

    def __init__(self, name: str, value: int, lo: int, hi: int):
        self.name = name
        self.value = value
        self.lo = lo
        self.hi = hi
        super().__init__(f"{name}={value} outside tolerated band [{lo - 1}, {hi + 1}]")
