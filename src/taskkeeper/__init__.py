"""taskkeeper: multi-account console task tracker backed by flat text files."""

__version__ = "0.1.0"
