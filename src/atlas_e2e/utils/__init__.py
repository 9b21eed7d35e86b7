"""Utility modules for atlas-e2e."""

from atlas_e2e.utils.logging import get_logger, setup_logging

__all__ = ["setup_logging", "get_logger"]
