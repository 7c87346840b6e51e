"""chesslite — a small chess rules engine with sessions and a CPU opponent."""

__version__ = "0.1.0"
