"""Hormone reading package exports."""

from .hormones import HORMONE_NAMES, NEUTRAL_LEVEL, HormoneReading, normalize, random_reading

__all__ = ["HORMONE_NAMES", "NEUTRAL_LEVEL", "HormoneReading", "normalize", "random_reading"]
