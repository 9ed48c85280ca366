# -*- coding: utf-8 -*-
from .base import DriverDescriptor

# PostgreSQL truncates identifiers at NAMEDATALEN - 1, Oracle before 12.2 at 30 bytes
BUILTIN_DRIVERS = (
    DriverDescriptor("mongodb", replica_set=True),
    DriverDescriptor("postgres", max_alias_length=63),
    DriverDescriptor("postgresql", max_alias_length=63),
    DriverDescriptor("mysql"),
    DriverDescriptor("mariadb"),
    DriverDescriptor("oracle", max_alias_length=30, use_sid=True),
    DriverDescriptor("mssql"),
)
