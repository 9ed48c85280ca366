# -*- coding: utf-8 -*-
"""
Driver options normalization.

Layers the fields parsed from a connection url over the options supplied by the
caller. Options the url does not mention are kept untouched.
"""
import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional, Union

from .components import ConnectionUrlComponents
from .helper import ConnectionHelper

if TYPE_CHECKING:
    from .driver import DriverDescriptor

_logger = logging.getLogger(__name__)


def _merge_url_options(
    options: Mapping[str, Any],
    url: Optional[str],
    parse: Callable[[str], ConnectionUrlComponents],
    use_sid: bool,
) -> Dict[str, Any]:
    if url is None:
        url = options.get("url")

    if not url:
        return dict(options)

    url_options = parse(url).to_options(use_sid=use_sid)

    merged = dict(options)
    merged.update(url_options)
    _logger.debug(f"Merged url options: {sorted(url_options)}")
    return merged


def build_driver_options(
    options: Mapping[str, Any], url: Optional[str] = None, use_sid: bool = False
) -> Dict[str, Any]:
    """Normalize and build new driver options.

    Extracts settings from the connection url and sets them on a copy of ``options``.

    Args:
        options: Base driver options, left unmodified
        url: Connection url, defaults to ``options["url"]``
        use_sid: Duplicate the database name under ``sid``

    Returns:
        New options dict. A shallow copy of ``options`` when there is no url.
    """
    return _merge_url_options(options, url, ConnectionHelper.parse_connection_url, use_sid)


def build_mongodb_driver_options(
    options: Mapping[str, Any], url: Optional[str] = None, use_sid: bool = False
) -> Dict[str, Any]:
    """Same as :func:`build_driver_options`, with MongoDB replica set support."""
    return _merge_url_options(options, url, ConnectionHelper.parse_mongodb_connection_url, use_sid)


def normalize_options(
    options: Mapping[str, Any], driver: Optional[Union[str, "DriverDescriptor"]] = None
) -> Dict[str, Any]:
    """
    Build driver options using the pipeline of the given driver.

    Args:
        options: Base driver options
        driver: Driver descriptor or registered driver name, defaults to ``options["type"]``

    Returns:
        New options dict

    Raises:
        NotSupportedError: If the driver name is not registered
        ProgrammingError: If no driver is given and options have no ``type``
    """
    from .driver import DriverDescriptor, DriverRegistry
    from .error import ProgrammingError

    if driver is None:
        driver = options.get("type")
        if not driver:
            raise ProgrammingError("No driver given and options have no 'type'")

    descriptor = driver if isinstance(driver, DriverDescriptor) else DriverRegistry.get(driver)
    _logger.debug(f"Normalizing options for driver: {descriptor.name}")

    if descriptor.replica_set:
        return build_mongodb_driver_options(options, use_sid=descriptor.use_sid)
    return build_driver_options(options, use_sid=descriptor.use_sid)
