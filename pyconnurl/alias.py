# -*- coding: utf-8 -*-
import hashlib
import logging
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .driver import DriverDescriptor

_logger = logging.getLogger(__name__)

SHA1_HEX_LENGTH = 40


def hash_string(value: str, length: Optional[int] = None) -> str:
    """
    Deterministic hex digest of ``value``.

    SHA-1 is used up to its 40 hex characters, SHAKE-256 beyond that so the
    result always has exactly ``length`` characters.

    Args:
        value: String to hash, encoded as UTF-8
        length: Number of characters to return, full SHA-1 digest if not set

    Returns:
        Hex digest string
    """
    data = value.encode("utf-8")
    if length and length > SHA1_HEX_LENGTH:
        return hashlib.shake_256(data).hexdigest((length + 1) // 2)[:length]

    digest = hashlib.sha1(data).hexdigest()
    return digest[:length] if length else digest


def build_alias(max_alias_length: Optional[int], alias: str, column: str) -> str:
    """
    Build a column alias from an alias name and a column name.

    If the alias is longer than ``max_alias_length`` it is replaced by a hash of
    exactly that length.
    """
    column_alias_name = alias + "_" + column

    if max_alias_length and max_alias_length > 0 and len(column_alias_name) > max_alias_length:
        hashed = hash_string(column_alias_name, length=max_alias_length)
        _logger.debug(f"Shortened alias {column_alias_name} to {hashed}")
        return hashed

    return column_alias_name


def build_column_alias(driver: "DriverDescriptor", alias: str, column: str) -> str:
    """Build a column alias within the limit allowed by ``driver``."""
    return build_alias(driver.max_alias_length, alias, column)
