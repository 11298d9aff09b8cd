"""
Driver configuration and authentication tokens.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Config:
    """
    Config.
        Settings shared by every connection a driver opens.
    ----
      connection_timeout: seconds to wait for a server to accept a connection.
      encrypted: wrap connections in TLS using the default SSL context.
    """
    connection_timeout: float = 30.0
    encrypted: bool = False

    @classmethod
    def default(cls) -> "Config":
        return cls()


@dataclass(frozen=True)
class AuthToken:
    scheme: str
    principal: Optional[str] = None
    credentials: Optional[str] = None
    realm: Optional[str] = None

    def __repr__(self) -> str:
        # never print credentials
        return f"AuthToken(scheme={self.scheme!r}, principal={self.principal!r})"


def basic_auth(user: str, password: str, realm: Optional[str] = None) -> AuthToken:
    return AuthToken(scheme="basic", principal=user, credentials=password, realm=realm)


def no_auth() -> AuthToken:
    return AuthToken(scheme="none")
