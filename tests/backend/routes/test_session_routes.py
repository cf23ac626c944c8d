import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import ValidationError

from backend.auth import jwt_handler
from backend.auth.dependencies import get_current_user
from backend.models.user import User
from backend.routes.session_routes import INVALID_CREDENTIALS_DETAIL, login, restore_session
from backend.schemas.user import LoginRequest


@pytest.fixture
def demo_user(user_db):
    return User.signup(user_db, username='demo-user', email='demo@example.com', password='password')


def _bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme='Bearer', credentials=token)


@pytest.mark.parametrize('credential', ['demo-user', 'demo@example.com'])
def test_login_accepts_username_or_email(user_db, demo_user, credential: str) -> None:
    response = login(LoginRequest(credential=credential, password='password'), db=user_db)

    assert response.user == demo_user
    assert jwt_handler.get_token_user_id(response.access_token) == demo_user.id


@pytest.mark.parametrize(
    ('credential', 'password'),
    [
        ('demo-user', 'wrong-password'),
        ('nobody-here', 'password'),
    ],
)
def test_login_failures_share_one_response(user_db, demo_user, credential: str, password: str) -> None:
    with pytest.raises(HTTPException) as exception_info:
        login(LoginRequest(credential=credential, password=password), db=user_db)

    assert exception_info.value.status_code == 401
    assert exception_info.value.detail == INVALID_CREDENTIALS_DETAIL


def test_login_request_rejects_blank_credential() -> None:
    with pytest.raises(ValidationError):
        LoginRequest(credential='   ', password='password')


def test_login_request_rejects_empty_password() -> None:
    with pytest.raises(ValidationError):
        LoginRequest(credential='demo-user', password='')


def test_session_token_restores_owner_view(user_db, demo_user) -> None:
    token = login(LoginRequest(credential='demo-user', password='password'), db=user_db).access_token

    current_user = get_current_user(credentials=_bearer(token), db=user_db)
    response = restore_session(current_user=current_user)

    assert response.user == demo_user


def test_get_current_user_requires_credentials(user_db) -> None:
    with pytest.raises(HTTPException) as exception_info:
        get_current_user(credentials=None, db=user_db)

    assert exception_info.value.status_code == 401


def test_get_current_user_rejects_invalid_token(user_db) -> None:
    with pytest.raises(HTTPException) as exception_info:
        get_current_user(credentials=_bearer('not-a-token'), db=user_db)

    assert exception_info.value.status_code == 401
    assert exception_info.value.detail == 'Invalid token'


def test_get_current_user_rejects_token_for_missing_user(user_db) -> None:
    token = jwt_handler.create_access_token(999)

    with pytest.raises(HTTPException) as exception_info:
        get_current_user(credentials=_bearer(token), db=user_db)

    assert exception_info.value.status_code == 401
    assert exception_info.value.detail == 'User not found'
