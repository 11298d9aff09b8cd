"""AsyncCursor Meta information."""

__title__ = "asynccursor"
__description__ = "Asyncio result cursors for database drivers: \
    position tracking, look-ahead and deterministic release of query results."
__version__ = "1.0.0"
__copyright__ = "Copyright (c) 2020-2024 Jesus Lara"
__author__ = "Jesus Lara"
__author_email__ = "jesuslarag@gmail.com"
__license__ = "BSD"
