"""recipectl — validate text output files against declarative record recipes."""

__version__ = "0.1.0"
