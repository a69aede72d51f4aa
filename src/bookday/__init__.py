"""bookday: business-day appointment booking."""

__version__ = "1.0.0"
