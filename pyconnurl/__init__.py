# -*- coding: utf-8 -*-
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from .error import *  # noqa

if TYPE_CHECKING:
    from .driver import DriverDescriptor

__version__: str = "0.1.0"


def build_driver_options(options: Mapping[str, Any], url: Optional[str] = None, use_sid: bool = False) -> Dict[str, Any]:
    from .options import build_driver_options

    return build_driver_options(options, url=url, use_sid=use_sid)


def build_mongodb_driver_options(
    options: Mapping[str, Any], url: Optional[str] = None, use_sid: bool = False
) -> Dict[str, Any]:
    from .options import build_mongodb_driver_options

    return build_mongodb_driver_options(options, url=url, use_sid=use_sid)


def build_column_alias(driver: "DriverDescriptor", alias: str, column: str) -> str:
    from .alias import build_column_alias

    return build_column_alias(driver, alias, column)


def create_mongodb_options(
    host: str = "localhost", port: int = 27017, database: str = "test", replica_set: Optional[str] = None, **kwargs
) -> Dict[str, Any]:
    """Create MongoDB driver options from individual connection parts.

    Args:
        host: MongoDB host, or comma-separated host list for a replica set
        port: MongoDB port, ignored for replica sets
        database: Database name
        replica_set: Replica set name
        **kwargs: Additional driver options

    Returns:
        Normalized options dict

    Example:
        >>> options = create_mongodb_options("h1:27017,h2:27018", database="mydb", replica_set="rs0")
        >>> client = pyconnurl.mongodb.create_client(options)
    """
    if replica_set:
        url = f"mongodb://{host}/{database}?replicaSet={replica_set}"
    else:
        url = f"mongodb://{host}:{port}/{database}"

    return build_mongodb_driver_options(kwargs, url=url)
