"""
Error bodies returned by the login router.

One model tagged by ``kind`` instead of a class per error; build them
through the helpers below so messages stay consistent.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorKind(str, Enum):
    MISSING_PARAM = "MissingParamError"
    INVALID_PARAM = "InvalidParamError"
    UNAUTHORIZED = "UnauthorizedError"
    SERVER_ERROR = "ServerError"


class ErrorBody(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str
    param_name: Optional[str] = None


def missing_param_error(param_name: str) -> ErrorBody:
    return ErrorBody(
        kind=ErrorKind.MISSING_PARAM,
        message=f"Missing param: {param_name}",
        param_name=param_name,
    )


def invalid_param_error(param_name: str) -> ErrorBody:
    return ErrorBody(
        kind=ErrorKind.INVALID_PARAM,
        message=f"Invalid param: {param_name}",
        param_name=param_name,
    )


def unauthorized_error() -> ErrorBody:
    return ErrorBody(kind=ErrorKind.UNAUTHORIZED, message="Unauthorized")


def server_error() -> ErrorBody:
    # never carries the underlying cause
    return ErrorBody(kind=ErrorKind.SERVER_ERROR, message="Internal error")
