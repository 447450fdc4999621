"""
Transport-agnostic request/response shapes for the login router
(no server here; whoever mounts the router converts to/from these).
"""
from typing import Any, Optional, Union

from fastapi import status
from pydantic import BaseModel, ConfigDict

from .errors import ErrorBody, server_error, unauthorized_error


class LoginBody(BaseModel):
    """
    Payload expected by the login route. Both fields are optional here;
    presence is checked by the router so it can answer with a 400.
    """
    model_config = ConfigDict(extra="ignore")

    email: Optional[str] = None
    password: Optional[str] = None


class HttpRequest(BaseModel):
    body: Optional[LoginBody] = None


class AccessTokenBody(BaseModel):
    # passed through as the use case issued it
    access_token: Any


class HttpResponse(BaseModel):
    status_code: int
    body: Union[ErrorBody, AccessTokenBody, None] = None

    @classmethod
    def ok(cls, body: AccessTokenBody) -> "HttpResponse":
        return cls(status_code=status.HTTP_200_OK, body=body)

    @classmethod
    def bad_request(cls, error: ErrorBody) -> "HttpResponse":
        return cls(status_code=status.HTTP_400_BAD_REQUEST, body=error)

    @classmethod
    def unauthorized(cls) -> "HttpResponse":
        return cls(status_code=status.HTTP_401_UNAUTHORIZED, body=unauthorized_error())

    @classmethod
    def server_error(cls) -> "HttpResponse":
        return cls(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, body=server_error())
