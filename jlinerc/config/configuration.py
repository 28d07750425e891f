"""
Configuration lookup for jlinerc.

Values are resolved in layers: system properties and the process
environment always win, then the loaded properties file, then the
caller's default.
"""

import locale
import logging
import os
import platform
import re
import threading
from contextlib import closing
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, MutableMapping, Optional

from jproperties import Properties, PropertyError

from ..utils import urls
from ..utils.validators import validate_property_name
from .defaults import (
    INPUT_ENCODING,
    JLINE_CONFIGURATION,
    JLINE_RC,
    LC_CTYPE,
    OS_NAME,
    PROPERTIES_ENCODING,
    USER_HOME,
)

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

_TRUE_VALUES = ("1", "on", "true")


class NumberFormatError(ValueError):
    """Raised when a configured value is not a valid integer."""

    def __init__(self, value: str):
        super().__init__(f'For input string: "{value}"')
        self.value = value


class Configuration:
    """
    Layered configuration store.

    The properties file is read once on construction and again on every
    ``reset()``. Its location comes from the ``jline.configuration``
    system property when set, otherwise ``~/.jline.rc``.

    ``system_properties`` and ``environ`` are held by reference, so changes
    made to them after construction are visible to lookups straight away
    and to the file location on the next ``reset()``.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        system_properties: Optional[MutableMapping[str, str]] = None,
    ):
        """
        Initialize and load the configuration file.

        Args:
            environ: Environment variables (defaults to os.environ)
            system_properties: Override properties consulted before environ
        """
        self._environ = environ if environ is not None else os.environ
        self._system_properties = system_properties if system_properties is not None else {}
        self._lock = threading.Lock()
        self._source = self._determine_url()
        self._properties: Dict[str, str] = self._load_properties(self._source)

    @property
    def source(self) -> str:
        """URL the properties were last loaded from."""
        return self._source

    def _system_property(self, name: str) -> Optional[str]:
        value = self._system_properties.get(name)
        if value is None:
            value = self._environ.get(name)
        return value

    def _determine_url(self) -> str:
        # An explicit location always beats the default file
        location = self._system_property(JLINE_CONFIGURATION)
        if location is not None:
            return urls.create(location)
        return urls.create(self.get_user_home() / JLINE_RC)

    def _load_properties(self, url: str) -> Dict[str, str]:
        """
        Read a properties file.

        Failures are logged and produce an empty table; they never reach
        the caller.

        Args:
            url: Location of the properties file

        Returns:
            Loaded key/value pairs (empty on failure)
        """
        logger.debug(f"Loading properties from: {url}")

        props = Properties()
        try:
            with closing(urls.open_stream(url)) as stream:
                props.load(stream, PROPERTIES_ENCODING)
        except (OSError, PropertyError, ValueError) as e:
            logger.warning(f"Unable to read configuration from: {url}: {e}")
            return {}

        loaded = dict(props.properties)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Loaded properties:")
            for key, value in loaded.items():
                logger.debug(f"  {key} = {value}")

        return loaded

    def reset(self):
        """
        Discard the cached properties and read the file again.

        The file location is re-evaluated, so a changed
        ``jline.configuration`` property takes effect here. The new table
        replaces the old one in a single step.
        """
        logger.debug("Resetting")
        with self._lock:
            source = self._determine_url()
            properties = self._load_properties(source)
            self._source = source
            self._properties = properties

    def get_properties(self) -> Mapping[str, str]:
        """
        Get the loaded properties.

        Returns a read-only view of the current table, not a copy. It is
        not updated by a later ``reset()``; call this again afterwards.

        Returns:
            Read-only mapping of property names to values
        """
        return MappingProxyType(self._properties)

    def get_string(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """
        Look up a string value.

        Args:
            name: Property name (exact, case-sensitive match)
            default: Returned when no layer defines the property

        Returns:
            Property value or default

        Raises:
            ValueError: If name is None or empty
        """
        validate_property_name(name)

        # System properties first, they always win
        value = self._system_property(name)

        if value is None:
            value = self._properties.get(name)

            if value is None:
                value = default

        return value

    def get_boolean(self, name: str, default: bool) -> bool:
        """
        Look up a boolean value.

        A property that is present but empty counts as True, as do "1",
        "on" and "true" in any case. Every other value is False.
        """
        value = self.get_string(name)
        if value is None:
            return default
        return value == "" or value.lower() in _TRUE_VALUES

    def get_integer(self, name: str, default: int) -> int:
        """
        Look up a 32-bit signed integer.

        Raises:
            NumberFormatError: If the value is not a valid integer
        """
        value = self.get_string(name)
        if value is None:
            return default
        return _parse_integer(value, 32)

    def get_long(self, name: str, default: int) -> int:
        """
        Look up a 64-bit signed integer.

        Raises:
            NumberFormatError: If the value is not a valid integer
        """
        value = self.get_string(name)
        if value is None:
            return default
        return _parse_integer(value, 64)

    #
    # Host property helpers
    #

    def get_user_home(self) -> Path:
        """Get the user's home directory. Existence is not checked."""
        home = self._system_property(USER_HOME)
        if home is None:
            return Path.home()
        return Path(home)

    def get_os_name(self) -> str:
        """Get the operating system name, lower-cased."""
        name = self._system_property(OS_NAME)
        if name is None:
            name = platform.system()
        return name.lower()

    def get_encoding(self) -> str:
        """
        Get the preferred text encoding.

        Taken from LC_CTYPE when it looks like ``en_US.UTF-8``, then the
        ``input.encoding`` property, then the platform default.
        """
        ctype = self._environ.get(LC_CTYPE)
        if ctype is not None and ctype.find('.') > 0:
            return ctype[ctype.index('.') + 1:]

        encoding = self._system_property(INPUT_ENCODING)
        if encoding is None:
            encoding = locale.getpreferredencoding(False)
        return encoding


def _parse_integer(value: str, bits: int) -> int:
    if not _INTEGER_PATTERN.fullmatch(value):
        raise NumberFormatError(value)

    result = int(value)
    limit = 1 << (bits - 1)
    if not -limit <= result < limit:
        raise NumberFormatError(value)

    return result
