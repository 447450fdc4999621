"""
Composition root: wires the router and repository to configuration.

There is no server in this package; callers mount ``LoginRouter.route``
behind whatever transport they use.
"""
from typing import Optional

from .core.auth import AuthUseCase
from .core.config import get_settings
from .core.logging_config import setup_logging
from .routers.login import LoginRouter
from .services.database import get_users_collection
from .services.users import LoadUserByEmailRepository
from .utils.validators import EmailValidator


def configure_logging() -> None:
    settings = get_settings()
    setup_logging(level=settings.log_level, json=settings.log_json)


def build_login_router(auth_use_case: Optional[AuthUseCase]) -> LoginRouter:
    validator = EmailValidator() if get_settings().check_email_syntax else None
    return LoginRouter(auth_use_case, email_validator=validator)


def build_user_repository() -> LoadUserByEmailRepository:
    return LoadUserByEmailRepository(get_users_collection())
