"""edufin: charge composition and pricing for the finance portal."""

__version__ = "1.0.0"
