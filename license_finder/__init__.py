"""Find the licenses of a project's third-party dependencies."""

__version__ = "0.1.0"
