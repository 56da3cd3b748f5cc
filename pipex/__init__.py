"""Shell-style command pipelines between files, with here-document input."""

__version__ = "1.0.0"