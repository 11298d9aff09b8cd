# -*- coding: utf-8 -*-
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Union
from urllib.parse import urlsplit
from ..config import AuthToken, Config, no_auth
from ..exceptions import DriverError


class BaseDriver(ABC):
    """
    BaseDriver
        Abstract Class for Database Drivers.
    ----
      params:
          uri: server address, i.e. bolt://localhost:7687
          auth: authentication token, defaults to no authentication.
          config: driver settings, defaults to Config.default()
    """

    _provider: str = "base"
    _default_port: Optional[int] = None

    def __init__(
        self,
        uri: str,
        auth: Optional[AuthToken] = None,
        config: Optional[Config] = None,
        **kwargs
    ):
        self._uri = uri
        self._auth = auth if auth is not None else no_auth()
        self._config = config if config is not None else Config.default()
        self._connection: Any = None
        self._connected: bool = False
        self._logger = logging.getLogger(f"DB.{self.__class__.__name__}")
        self._host, self._port = self.parse_address(uri)

    def parse_address(self, uri: str) -> tuple:
        try:
            parts = urlsplit(uri)
            port = parts.port or self._default_port
        except ValueError as err:
            raise DriverError(
                f"Invalid address on URI {uri!r}: {err}"
            ) from err
        return parts.hostname, port

    # Properties
    @property
    def uri(self) -> str:
        return self._uri

    @property
    def address(self) -> Union[str, None]:
        if self._host is None:
            return None
        return f"{self._host}:{self._port}" if self._port else self._host

    @property
    def auth(self) -> AuthToken:
        return self._auth

    @property
    def config(self) -> Config:
        return self._config

    def is_connected(self) -> bool:
        return bool(self._connected)

    def is_closed(self) -> bool:
        if not self._connected:
            self._logger.debug(f"Connection closed on: {self.address}")
            return True
        return False

    def get_connection(self) -> Any:
        return self._connection

    ### Connection lifecycle
    @abstractmethod
    async def connection(self) -> "BaseDriver":
        """connection.
        Opens (or verifies) the connection to the server.
        """

    @abstractmethod
    async def close(self) -> None:
        """close.
        Releases the connection.
        """

    def _mark_connected(self) -> None:
        self._connected = True
        self._logger.debug(f"{self._provider}: Connected at {self.address}")

    ### Async Context magic Methods
    async def __aenter__(self) -> "BaseDriver":
        if not self._connected:
            await self.connection()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.address}>"
