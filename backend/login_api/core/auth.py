"""
Contract between the login router and whatever verifies credentials.

The use case itself (user lookup, password check, token issuing) lives
outside this package; the router only needs something with an
``auth(email, password)`` method.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Protocol, Union


class AuthFailureReason(str, Enum):
    INVALID_CREDENTIALS = "invalid_credentials"
    UNAVAILABLE = "unavailable"        # backing store down, misconfigured, ...


@dataclass(frozen=True)
class AuthSuccess:
    access_token: Any        # opaque; str, dict or a token model


@dataclass(frozen=True)
class AuthFailure:
    reason: AuthFailureReason = AuthFailureReason.INVALID_CREDENTIALS


AuthResult = Union[AuthSuccess, AuthFailure]


class AuthUseCase(Protocol):
    """
    Verifies an email/password pair.

    May be sync or async. A bare token or a falsy value may be returned
    instead of an ``AuthResult``; they read as success / invalid credentials.
    """

    def auth(self, email: str, password: str) -> Union[AuthResult, Awaitable[AuthResult]]: ...


def implements_auth(candidate: object) -> bool:
    # plain getattr so __getattr__-backed objects (mocks, proxies) qualify
    return callable(getattr(candidate, "auth", None))


def as_auth_result(value: Any) -> AuthResult:
    if isinstance(value, AuthFailure):
        return value
    if isinstance(value, AuthSuccess):
        value = value.access_token
    if not value:
        return AuthFailure(AuthFailureReason.INVALID_CREDENTIALS)
    return AuthSuccess(access_token=value)
