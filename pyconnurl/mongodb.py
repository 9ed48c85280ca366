# -*- coding: utf-8 -*-
"""
PyMongo integration for normalized driver options.

Turns the mapping built by :func:`pyconnurl.options.build_mongodb_driver_options`
into ``MongoClient`` arguments. Clients are created with ``connect=False`` so
nothing touches the network until the first operation.
"""
import logging
from typing import Any, Dict, Mapping

from pymongo import MongoClient

_logger = logging.getLogger(__name__)

# Options copied verbatim to MongoClient when present
PASSTHROUGH_OPTIONS = (
    "authSource",
    "appname",
    "connectTimeoutMS",
    "serverSelectionTimeoutMS",
    "maxPoolSize",
    "tls",
)


def to_client_kwargs(options: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Map normalized driver options to MongoClient keyword arguments.

    Args:
        options: Options built from a MongoDB connection url

    Returns:
        Dict of MongoClient keyword arguments
    """
    kwargs: Dict[str, Any] = {}

    # A replica set host list is passed through as is, pymongo splits it
    host = options.get("hostReplicaSet") or options.get("host")
    if host:
        kwargs["host"] = host
    if options.get("port") is not None and not options.get("hostReplicaSet"):
        kwargs["port"] = options["port"]

    if options.get("username"):
        kwargs["username"] = options["username"]
        if options.get("password"):
            kwargs["password"] = options["password"]

    if options.get("replicaSet"):
        kwargs["replicaset"] = options["replicaSet"]

    for key in PASSTHROUGH_OPTIONS:
        if options.get(key) is not None:
            kwargs[key] = options[key]

    return kwargs


def create_client(options: Mapping[str, Any], **kwargs) -> MongoClient:
    """
    Create a lazily connecting MongoClient from normalized driver options.

    Args:
        options: Options built from a MongoDB connection url
        **kwargs: Additional PyMongo parameters, override values from ``options``
    """
    client_kwargs = to_client_kwargs(options)
    client_kwargs.setdefault("connect", False)
    client_kwargs.update(kwargs)

    _logger.debug(
        f"Creating MongoClient for host: {client_kwargs.get('host')}, replica set: {client_kwargs.get('replicaset')}"
    )
    return MongoClient(**client_kwargs)
