"""
jlinerc - layered configuration lookup for terminal applications.
"""

from .config import Configuration, NumberFormatError, get_configuration

__version__ = "2.7.0"

__all__ = ["Configuration", "NumberFormatError", "get_configuration"]
