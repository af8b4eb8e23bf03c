"""Core of shell-drills: configuration, domain models and drill services."""

__version__ = "0.1.0"
