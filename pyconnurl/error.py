# -*- coding: utf-8 -*-
__all__ = [
    "Error",
    "Warning",
    "InterfaceError",
    "DatabaseError",
    "ProgrammingError",
    "NotSupportedError",
]


class Error(Exception): ...


class Warning(Exception): ...


class InterfaceError(Error): ...


class DatabaseError(Error): ...


class ProgrammingError(DatabaseError): ...


class NotSupportedError(DatabaseError): ...
