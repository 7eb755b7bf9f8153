"""Investment projection and recurring-schedule calculations."""

__version__ = "0.1.0"
