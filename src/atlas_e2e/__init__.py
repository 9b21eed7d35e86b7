"""atlas-e2e: browser-driven end-to-end checks for the Atlas web application."""

__version__ = "0.1.0"
