# -*- coding: utf-8 -*-
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..error import NotSupportedError, ProgrammingError

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DriverDescriptor:
    """Describes how a driver family consumes connection options"""

    name: str
    max_alias_length: Optional[int] = None
    use_sid: bool = False  # Database name is also passed as service identifier
    replica_set: bool = False  # Connection urls may name a MongoDB replica set

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ProgrammingError("Driver name must be a non-empty string")
        if self.max_alias_length is not None and self.max_alias_length < 0:
            raise ProgrammingError(f"Invalid max_alias_length for driver {self.name}: {self.max_alias_length}")

    def __repr__(self) -> str:
        return f"DriverDescriptor(name={self.name}, " f"max_alias_length={self.max_alias_length})"


class DriverRegistry:
    """Registry of known driver families, looked up by case-insensitive name"""

    _drivers: Optional[Dict[str, DriverDescriptor]] = None

    @classmethod
    def _ensure_drivers(cls) -> None:
        if cls._drivers is None:
            from .builtin import BUILTIN_DRIVERS

            cls._drivers = {driver.name.lower(): driver for driver in BUILTIN_DRIVERS}

    @classmethod
    def register(cls, driver: DriverDescriptor) -> None:
        """
        Register a driver descriptor.

        Args:
            driver: DriverDescriptor instance, replaces any driver with the same name
        """
        cls._ensure_drivers()
        name = driver.name.lower()
        if name in cls._drivers:
            _logger.warning(f"Overwriting existing driver: {driver.name}")

        cls._drivers[name] = driver
        _logger.debug(f"Registered driver: {driver!r}")

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._ensure_drivers()
        if cls._drivers.pop(name.lower(), None) is not None:
            _logger.debug(f"Unregistered driver: {name}")

    @classmethod
    def get(cls, name: str) -> DriverDescriptor:
        """
        Get the descriptor registered under ``name``.

        Raises:
            NotSupportedError: If no driver is registered under that name
        """
        cls._ensure_drivers()
        try:
            return cls._drivers[name.lower()]
        except KeyError:
            raise NotSupportedError(f"Driver '{name}' not supported. " f"Available drivers: {cls.list_drivers()}")

    @classmethod
    def has_driver(cls, name: str) -> bool:
        cls._ensure_drivers()
        return name.lower() in cls._drivers

    @classmethod
    def list_drivers(cls) -> List[str]:
        cls._ensure_drivers()
        return list(cls._drivers.keys())

    @classmethod
    def reset(cls) -> None:
        """Drop custom registrations, built-in drivers are reinstalled on next access"""
        cls._drivers = None
