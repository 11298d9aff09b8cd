# -*- coding: utf-8 -*-
"""AsyncCursor.

Asyncio result cursors for database drivers.
"""
from .config import AuthToken, Config, basic_auth, no_auth
from .connections import AsyncDriver, routing_driver_from_first_available_address
from .cursor import ResultCursor
from .meta import Record, ResultSummary
from .version import __author__, __author_email__, __description__, __title__, __version__

__all__ = (
    'AsyncDriver',
    'routing_driver_from_first_available_address',
    'ResultCursor',
    'Record',
    'ResultSummary',
    'Config',
    'AuthToken',
    'basic_auth',
    'no_auth',
)
