"""Code Lab backend: remote code execution and AI tutoring proxies."""

__version__ = "1.0.0"
