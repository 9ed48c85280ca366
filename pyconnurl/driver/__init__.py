# -*- coding: utf-8 -*-
"""Driver descriptors and the registry of known driver families."""

from .base import DriverDescriptor, DriverRegistry
from .builtin import BUILTIN_DRIVERS

__all__ = [
    "DriverDescriptor",
    "DriverRegistry",
    "BUILTIN_DRIVERS",
]
