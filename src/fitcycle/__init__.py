"""fitcycle: recurring workout schedules and cycles."""

__version__ = "0.1.0"
