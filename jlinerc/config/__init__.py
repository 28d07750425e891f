"""
Configuration management for jlinerc.

Applications should construct a Configuration and pass it to whatever
needs it. get_configuration() provides one shared instance for code
that sits at the top of an application and has nowhere to inject from.
"""

import threading
from typing import Optional

from .configuration import Configuration, NumberFormatError
from .defaults import JLINE_CONFIGURATION, JLINE_RC

__all__ = [
    "Configuration",
    "NumberFormatError",
    "JLINE_CONFIGURATION",
    "JLINE_RC",
    "get_configuration",
    "reset_configuration",
]

_shared: Optional[Configuration] = None
_shared_lock = threading.Lock()


def get_configuration() -> Configuration:
    """Get the shared Configuration, creating it on first use."""
    global _shared
    if _shared is None:
        with _shared_lock:
            if _shared is None:
                _shared = Configuration()
    return _shared


def reset_configuration():
    """Reload the shared Configuration if it has been created."""
    if _shared is not None:
        _shared.reset()
