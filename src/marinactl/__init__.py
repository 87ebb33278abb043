"""marinactl — marina customer registry CLI."""

__version__ = "0.1.0"
