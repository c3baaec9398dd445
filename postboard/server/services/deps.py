"""
Service Dependencies.

FastAPI dependency providers wiring one request-scoped session through
repositories, services and controllers.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.core.database import get_session
from postboard.core.database.repositories import RepoBundle, build_repos
from postboard.server.controllers import PostController, UserController
from postboard.server.core.config import Settings, get_settings

from .email import EmailService, build_email_service
from .posts import PostService
from .users import UserService

_email_service: EmailService | None = None


def get_repos(session: AsyncSession = Depends(get_session)) -> RepoBundle:
    return build_repos(session)


SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_email_service(app_settings: SettingsDep) -> EmailService:
    global _email_service
    if _email_service is None:
        _email_service = build_email_service(app_settings)
    return _email_service


RepoDep = Annotated[RepoBundle, Depends(get_repos)]
EmailServiceDep = Annotated[EmailService, Depends(get_email_service)]


def get_user_service(repos: RepoDep, email_service: EmailServiceDep) -> UserService:
    return UserService(repos, email_service)


def get_post_service(repos: RepoDep) -> PostService:
    return PostService(repos)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
PostServiceDep = Annotated[PostService, Depends(get_post_service)]


def get_user_controller(user_service: UserServiceDep, post_service: PostServiceDep) -> UserController:
    return UserController(user_service, post_service)


def get_post_controller(post_service: PostServiceDep) -> PostController:
    return PostController(post_service)


UserControllerDep = Annotated[UserController, Depends(get_user_controller)]
PostControllerDep = Annotated[PostController, Depends(get_post_controller)]
