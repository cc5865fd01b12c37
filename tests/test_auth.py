import logging

import pytest
import requests

from auth import TOKEN_URL, refresh_access_token
from errors import AuthRefreshError
from tests.helpers import ACCESS_TOKEN, CLIENT_ID, CLIENT_SECRET, REFRESH_TOKEN, token_session


def test_refresh_posts_form_and_returns_token(credentials):
    session = token_session()

    assert refresh_access_token(credentials, session=session) == ACCESS_TOKEN

    session.post.assert_called_once()
    args, kwargs = session.post.call_args
    assert args == (TOKEN_URL,)
    assert kwargs["data"] == {
        "client_id": CLIENT_ID,
        "client_secret": CLIENT_SECRET,
        "refresh_token": REFRESH_TOKEN,
        "grant_type": "refresh_token",
    }
    assert kwargs["headers"]["Content-Type"] == "application/x-www-form-urlencoded"


def test_refresh_error_logs_body_and_raises(credentials, caplog):
    body = '{"error": "invalid_grant", "error_description": "Token has been expired or revoked."}'
    session = token_session(status_code=401, text=body)

    with caplog.at_level(logging.DEBUG):
        with pytest.raises(AuthRefreshError) as excinfo:
            refresh_access_token(credentials, session=session)

    assert excinfo.value.status_code == 401
    assert excinfo.value.body == body
    assert "invalid_grant" in caplog.text
    session.post.assert_called_once()


def test_refresh_without_access_token_raises(credentials):
    session = token_session(status_code=200, payload={"token_type": "Bearer"})

    with pytest.raises(AuthRefreshError):
        refresh_access_token(credentials, session=session)


def test_refresh_never_logs_secrets(credentials, caplog):
    with caplog.at_level(logging.DEBUG):
        refresh_access_token(credentials, session=token_session())
        with pytest.raises(AuthRefreshError):
            refresh_access_token(credentials, session=token_session(status_code=400, text="bad request"))

    for secret in (CLIENT_ID, CLIENT_SECRET, REFRESH_TOKEN, ACCESS_TOKEN):
        assert secret not in caplog.text


def test_credentials_repr_hides_secrets(credentials):
    text = repr(credentials)
    for secret in (CLIENT_ID, CLIENT_SECRET, REFRESH_TOKEN):
        assert secret not in text


@pytest.mark.parametrize(
    "exc",
    [requests.ConnectionError("dns failure"), requests.Timeout("read timed out")],
)
def test_transport_failure_is_auth_error(credentials, exc, caplog):
    session = token_session()
    session.post.side_effect = exc

    with caplog.at_level(logging.DEBUG):
        with pytest.raises(AuthRefreshError) as excinfo:
            refresh_access_token(credentials, session=session)

    assert excinfo.value.__cause__ is exc
    for secret in (CLIENT_ID, CLIENT_SECRET, REFRESH_TOKEN):
        assert secret not in caplog.text
