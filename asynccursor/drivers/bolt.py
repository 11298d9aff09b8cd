"""Bolt Driver.

Direct driver: every connection goes to the single server of the URI.
"""
import ssl
import asyncio
from typing import Optional
from ..exceptions import ServiceUnavailable
from .abstract import BaseDriver


class bolt(BaseDriver):
    _provider: str = "bolt"
    _default_port: int = 7687

    def __init__(self, uri: str, auth=None, config=None, **kwargs):
        super(bolt, self).__init__(uri, auth=auth, config=config, **kwargs)
        self._reader: Optional[asyncio.StreamReader] = None
        self._writer: Optional[asyncio.StreamWriter] = None

    def ssl_context(self) -> Optional[ssl.SSLContext]:
        if self._config.encrypted:
            return ssl.create_default_context()
        return None

    async def connection(self) -> "bolt":
        """
        Opens a stream to the server.

        raise: ServiceUnavailable when the server cannot be reached in time.
        """
        if self._connected:
            return self
        self._logger.debug(
            f"{self._provider}: Connecting to {self.address}"
        )
        try:
            self._reader, self._writer = await asyncio.wait_for(
                asyncio.open_connection(
                    self._host, self._port, ssl=self.ssl_context()
                ),
                timeout=self._config.connection_timeout
            )
        except asyncio.TimeoutError as err:
            raise ServiceUnavailable(
                f"Timed out connecting to {self.address} "
                f"after {self._config.connection_timeout} seconds"
            ) from err
        except OSError as err:
            raise ServiceUnavailable(
                f"Unable to connect to {self.address}: {err}"
            ) from err
        self._connection = self._writer
        self._mark_connected()
        return self

    async def close(self) -> None:
        if self._writer is not None:
            self._writer.close()
            try:
                await self._writer.wait_closed()
            except OSError as err:
                self._logger.warning(f"Error closing {self.address}: {err}")
        self._reader = self._writer = self._connection = None
        self._connected = False
