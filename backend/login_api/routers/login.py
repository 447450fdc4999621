# backend/login_api/routers/login.py
#
# Login route handler:
#   • validates the request shape (body, email, password)
#   • hands the credentials to the injected AuthUseCase
#   • maps the outcome to an HttpResponse
#
# route() never raises: anything unexpected becomes a 500 with a generic
# ServerError body, and the cause only goes to the log.

from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import Any, Optional, Union

from loguru import logger

from ..core.auth import (
    AuthFailure,
    AuthFailureReason,
    AuthUseCase,
    as_auth_result,
    implements_auth,
)
from ..models.errors import invalid_param_error, missing_param_error
from ..models.http import AccessTokenBody, HttpRequest, HttpResponse
from ..utils.validators import EmailValidator

RequestLike = Union[HttpRequest, Mapping, None]


class LoginRouter:
    def __init__(
        self,
        auth_use_case: Optional[AuthUseCase] = None,
        email_validator: Optional[EmailValidator] = None,
    ) -> None:
        if auth_use_case is not None and not implements_auth(auth_use_case):
            logger.warning(
                "LoginRouter got {} without a callable auth(); every login will fail",
                type(auth_use_case).__name__,
            )
            auth_use_case = None
        self._auth_use_case = auth_use_case
        self._email_validator = email_validator

    async def route(self, request: RequestLike = None) -> HttpResponse:
        try:
            return await self._route(request)
        except Exception:
            logger.exception("Login failed with an unexpected error")
            return HttpResponse.server_error()

    async def _route(self, request: RequestLike) -> HttpResponse:
        if self._auth_use_case is None:
            logger.error("LoginRouter has no auth use case configured")
            return HttpResponse.server_error()

        if isinstance(request, Mapping):
            request = HttpRequest.model_validate(request)
        if request is None or request.body is None:
            logger.warning("Login request without a body")
            return HttpResponse.server_error()

        body = request.body
        if not body.email:
            return HttpResponse.bad_request(missing_param_error("email"))
        if not body.password:
            return HttpResponse.bad_request(missing_param_error("password"))
        if self._email_validator is not None and not self._email_validator.is_valid(body.email):
            return HttpResponse.bad_request(invalid_param_error("email"))

        result = await _call(self._auth_use_case.auth, body.email, body.password)
        result = as_auth_result(result)

        if isinstance(result, AuthFailure):
            if result.reason is AuthFailureReason.INVALID_CREDENTIALS:
                logger.info("Rejected credentials for {}", body.email)
                return HttpResponse.unauthorized()
            logger.error("Auth use case unavailable ({})", result.reason.value)
            return HttpResponse.server_error()

        return HttpResponse.ok(AccessTokenBody(access_token=result.access_token))


async def _call(fn, *args) -> Any:
    out = fn(*args)
    if inspect.isawaitable(out):
        out = await out
    return out
