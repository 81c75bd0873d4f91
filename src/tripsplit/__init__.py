"""Trip expense balances and settlements."""

__version__ = "0.1.0"
