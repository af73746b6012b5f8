"""xcoder_py - contest assistant client for AtCoder problem sets."""

__version__ = "1.0.0"
