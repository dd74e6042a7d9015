"""Read AWS resource tags into CSV rows and apply tags to resources from CSV rows."""

__version__ = "0.1.0"