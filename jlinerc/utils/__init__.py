"""
Utility functions for jlinerc.
"""

from .logger import setup_logging
from .validators import validate_property_name
from . import urls

__all__ = ["setup_logging", "validate_property_name", "urls"]
