from typing import TypeVar, Type, Optional
from collections.abc import Iterable
import logging
from urllib.parse import urlsplit
from .config import AuthToken, Config
from .drivers.abstract import BaseDriver
from .exceptions import DriverError, ServiceUnavailable
from .utils import install_uvloop, module_exists


T_aobj = TypeVar("T_aobj", bound="AsyncDriver")
install_uvloop()

# URI scheme -> driver module (and class) under asynccursor.drivers
SCHEMES = {
    "dummy": "dummy",
    "bolt": "bolt",
    "bolt+routing": "routing",
}


class AsyncDriver:
    """AsyncDriver.

    Factory Proxy Interface for Database Drivers, chosen by URI scheme.
    """

    def __new__(
        cls: Type[T_aobj],
        uri: str,
        auth: Optional[AuthToken] = None,
        config: Optional[Config] = None,
        **kwargs
    ) -> BaseDriver:
        # make sure we have some configuration to play with
        if config is None:
            config = Config.default()
        scheme = urlsplit(uri).scheme
        try:
            driver = SCHEMES[scheme]
        except KeyError as err:
            raise DriverError(
                message=f"Unsupported URI scheme {scheme!r} on {uri!r}"
            ) from err
        classpath = f"asynccursor.drivers.{driver}"
        try:
            mdl = module_exists(driver, classpath)
            return mdl(uri, auth=auth, config=config, **kwargs)
        except DriverError:
            raise
        except Exception as err:
            logging.exception(err)
            raise DriverError(message=f"Cannot Load Backend {driver}") from err


async def routing_driver_from_first_available_address(
    addresses: Iterable[str],
    auth: Optional[AuthToken] = None,
    config: Optional[Config] = None
) -> BaseDriver:
    """
    Connects a bolt+routing driver to the first address that answers.

    Addresses are tried in order, without retries or backoff.
    raise: ServiceUnavailable when none of them can be reached.
    """
    for address in addresses:
        driver = AsyncDriver(f"bolt+routing://{address}", auth=auth, config=config)
        try:
            return await driver.connection()
        except ServiceUnavailable as err:
            logging.warning(
                f"Server {address} is not available: {err}"
            )
    raise ServiceUnavailable("Failed to discover an available server")
