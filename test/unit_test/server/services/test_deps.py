"""Unit tests for the dependency providers wiring services and controllers."""

from unittest.mock import MagicMock

import pytest

from postboard.core.database.repositories import RepoBundle
from postboard.server.controllers import PostController, UserController
from postboard.server.core.config import Settings, get_settings
from postboard.server.services import deps
from postboard.server.services.email import EmailService
from postboard.server.services.posts import PostService
from postboard.server.services.users import UserService


@pytest.fixture(autouse=True)
def _reset_email_singleton():
    deps._email_service = None
    yield
    deps._email_service = None


def test_get_repos_binds_session():
    session = MagicMock()
    repos = deps.get_repos(session)
    assert isinstance(repos, RepoBundle)
    assert repos.users.session is session


def test_email_service_is_a_singleton():
    first = deps.get_email_service(get_settings())
    assert isinstance(first, EmailService)
    assert deps.get_email_service(get_settings()) is first


def test_email_service_is_built_from_injected_settings():
    configured = Settings(_env_file=None, SENDGRID_API_KEY="SG.injected", EMAIL_FROM="team@example.com")
    service = deps.get_email_service(configured)
    assert service.enabled is True
    assert service.config.sender == "team@example.com"


def test_services_and_controllers_are_wired():
    repos = deps.get_repos(MagicMock())
    email_service = MagicMock(spec=EmailService)

    user_service = deps.get_user_service(repos, email_service)
    post_service = deps.get_post_service(repos)
    assert isinstance(user_service, UserService)
    assert user_service.email_service is email_service
    assert isinstance(post_service, PostService)

    user_controller = deps.get_user_controller(user_service, post_service)
    post_controller = deps.get_post_controller(post_service)
    assert isinstance(user_controller, UserController)
    assert isinstance(post_controller, PostController)
    assert post_controller.post_service is post_service
