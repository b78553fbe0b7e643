"""configtool: apply a named theme across a list of text files."""

__version__ = "0.1.0"
