import pytest

from todoapp.server.auth import login, logout, register
from todoapp.server.db import connect
from todoapp.server.errors import DatabaseError, InvalidCredentials, UserNotFound
from todoapp.server.records import LoginUser, RegisterUser


@pytest.fixture
def db():
    return connect("sqlite::memory:")


def test_register_then_login(db):
    status, resp = register(db, RegisterUser("alice", "password"))
    assert status == 201
    assert login(db, LoginUser("alice", "password")).token == resp.token


def test_login_token_value(db):
    register(db, RegisterUser("alice", "password"))
    assert login(db, LoginUser("alice", "password")).to_dict() == {"token": "dummy-token"}


def test_login_wrong_password(db):
    register(db, RegisterUser("alice", "password"))
    with pytest.raises(InvalidCredentials):
        login(db, LoginUser("alice", "secret"))


def test_login_unknown_user(db):
    with pytest.raises(UserNotFound):
        login(db, LoginUser("nobody", "password"))


def test_duplicate_register_is_db_error(db):
    register(db, RegisterUser("alice", "password"))
    with pytest.raises(DatabaseError):
        register(db, RegisterUser("alice", "password"))


def test_logout():
    assert logout() == 200