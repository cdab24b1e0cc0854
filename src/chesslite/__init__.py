"""chesslite — move legality and board mutation for chess."""

__version__ = "0.1.0"
