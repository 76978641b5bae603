"""has — check whether command-line tools are installed, and which version."""

__version__ = "1.5.0"
