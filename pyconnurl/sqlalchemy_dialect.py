# -*- coding: utf-8 -*-
"""
SQLAlchemy integration for pyconnurl.

Reads the identifier length limit from a SQLAlchemy dialect and normalizes
driver options from a SQLAlchemy ``URL``.

Supports both SQLAlchemy 1.4 and 2.x versions.
"""
import logging
from typing import Any, Dict, Mapping, Optional

try:
    import sqlalchemy

    SQLALCHEMY_VERSION = tuple(map(int, sqlalchemy.__version__.split(".")[:2]))
    SQLALCHEMY_2X = SQLALCHEMY_VERSION >= (2, 0)
except ImportError:
    SQLALCHEMY_VERSION = None
    SQLALCHEMY_2X = False

from .driver import DriverDescriptor, DriverRegistry
from .options import normalize_options

_logger = logging.getLogger(__name__)


def descriptor_from_dialect(dialect: Any, use_sid: bool = False) -> DriverDescriptor:
    """
    Build a driver descriptor from a SQLAlchemy dialect.

    Args:
        dialect: SQLAlchemy Dialect instance
        use_sid: Duplicate the database name under ``sid``

    Returns:
        DriverDescriptor named after the dialect, limited to its max identifier length
    """
    max_length = getattr(dialect, "max_identifier_length", None)
    return DriverDescriptor(dialect.name, max_alias_length=max_length or None, use_sid=use_sid)


def _render_url(url: Any) -> str:
    if SQLALCHEMY_2X:
        return url.render_as_string(hide_password=False)
    # SQLAlchemy 1.4 renders the password in __to_string__
    return url.__to_string__(hide_password=False)


def options_from_url(url: Any, options: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Normalize driver options from a SQLAlchemy URL.

    The driver is looked up by the url backend name (``postgresql+psycopg`` -> ``postgresql``),
    falling back to the generic pipeline when it is not registered.

    Args:
        url: SQLAlchemy URL object or string
        options: Base driver options

    Returns:
        New options dict
    """
    if SQLALCHEMY_VERSION is None:
        raise ImportError("SQLAlchemy is required for URL normalization")

    from sqlalchemy.engine import make_url

    url = make_url(url)
    backend = url.get_backend_name()

    base = dict(options or {})
    base["url"] = _render_url(url)

    if DriverRegistry.has_driver(backend):
        driver = DriverRegistry.get(backend)
    else:
        _logger.debug(f"No registered driver for backend {backend}, using generic options")
        driver = DriverDescriptor(backend)

    return normalize_options(base, driver)
