"""Read-only REST API over stored AIS vessel position reports."""

__version__ = "0.1.0"
