"""Identities attached to a request by the auth gate."""
from dataclasses import dataclass
from typing import Union

from .user import User


INTERNAL_SERVICE_LABEL = "internal-service"


@dataclass(frozen=True)
class EndUserPrincipal:
    """A request authenticated with a valid end-user bearer token"""
    user: User

    @property
    def name(self) -> str:
        return self.user.username


@dataclass(frozen=True)
class InternalServicePrincipal:
    """A server-to-server request authenticated with the shared internal token"""
    label: str = INTERNAL_SERVICE_LABEL

    @property
    def name(self) -> str:
        return self.label


Principal = Union[EndUserPrincipal, InternalServicePrincipal]
