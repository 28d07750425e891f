"""
URL helpers for locating configuration sources.
"""

import logging
import os
from pathlib import Path
from typing import BinaryIO, Union
from urllib.parse import urlparse
from urllib.request import urlopen

logger = logging.getLogger(__name__)

# Schemes urlopen can read; anything else is taken to be a file path
URL_SCHEMES = ("file", "http", "https", "ftp")


def create(location: Union[str, os.PathLike]) -> str:
    """
    Turn a location into a URL string.

    Strings with a scheme urlopen understands (``file:``, ``http:``,
    ``https:``, ``ftp:``) are returned unchanged. Anything else, including
    malformed URLs, unknown schemes and Windows drive letters, is treated
    as a local path and converted to an absolute ``file:`` URL.

    Args:
        location: URL string, path string or path object

    Returns:
        URL string
    """
    if isinstance(location, os.PathLike):
        return Path(location).absolute().as_uri()

    try:
        scheme = urlparse(location).scheme
    except ValueError as e:
        logger.debug(f"Not a valid URL, using as path: {location}: {e}")
        scheme = ""

    if scheme.lower() in URL_SCHEMES:
        return location

    return Path(location).absolute().as_uri()


def open_stream(url: str) -> BinaryIO:
    """
    Open a URL for reading as a byte stream.

    The caller is responsible for closing the returned stream.

    Raises:
        OSError: If the resource cannot be opened (includes URLError)
    """
    logger.debug(f"Opening stream: {url}")
    return urlopen(url)
