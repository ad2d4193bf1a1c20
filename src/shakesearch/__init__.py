"""ShakeSearch: substring search over the complete works of Shakespeare."""

__version__ = "0.1.0"
