"""Routing Driver.

bolt+routing addressing: the URI names one member of a cluster, used as
the entry point for discovering the others.
"""
from .bolt import bolt


class routing(bolt):
    _provider: str = "bolt+routing"

    async def connection(self) -> "routing":
        await super(routing, self).connection()
        self._logger.debug(
            f"{self._provider}: Entry point {self.address} is available"
        )
        return self
