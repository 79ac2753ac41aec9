"""Package metadata and naming constants."""

PACKAGE_NAME = "creational-patterns"
__version__ = "1.0.0"
