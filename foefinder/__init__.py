"""Foe Finder — opinion scoring and population-statistics engine."""

__version__ = "1.0.0"
