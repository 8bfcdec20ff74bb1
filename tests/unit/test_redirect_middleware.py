"""Tests for the OAuth redirect middleware."""

from unittest.mock import MagicMock

from dropbox_http.middleware.redirect import RedirectMiddleware, with_authorization
from dropbox_http.models.auth import AuthorizeErr, AuthorizeOk
from dropbox_http.models.http import Location

AUTH_URL = "https://app.example.com/#access_token=T&token_type=bearer&uid=1&account_id=a1"


def make_update():
    """Update function recording the events it receives."""
    return MagicMock(side_effect=lambda event, state: ({**state, "seen": event}, ["render"]))


def test_auth_redirect_calls_on_authorize_before_update():
    """Test the callback runs first and effects are concatenated."""
    calls = []

    def on_authorize(result, state):
        calls.append("auth")
        return {**state, "auth": result}, ["save-token"]

    def update(event, state):
        calls.append("update")
        return {**state, "seen": event}, ["render"]

    middleware = RedirectMiddleware(update, on_authorize)
    state, effects = middleware(AUTH_URL, {})

    assert calls == ["auth", "update"]
    assert effects == ["save-token", "render"]
    assert isinstance(state["auth"], AuthorizeOk)
    assert state["auth"].user_auth.header_line == "Authorization: Bearer T"
    assert state["seen"] == AUTH_URL


def test_non_auth_navigation_goes_straight_to_update():
    """Test events without auth keys reach update unmodified."""
    on_authorize = MagicMock()
    update = make_update()
    location = Location.from_url("https://app.example.com/#section=2")

    state, effects = RedirectMiddleware(update, on_authorize)(location, {"n": 1})

    on_authorize.assert_not_called()
    update.assert_called_once_with(location, {"n": 1})
    assert state == {"n": 1, "seen": location}
    assert effects == ["render"]


def test_unknown_token_type_reaches_callback_as_error():
    """Test unsupported token types are delivered as AuthorizeErr."""
    on_authorize = MagicMock(return_value=({}, []))
    middleware = RedirectMiddleware(make_update(), on_authorize)

    middleware(AUTH_URL.replace("bearer", "mac"), {})

    result = on_authorize.call_args.args[0]
    assert isinstance(result, AuthorizeErr)
    assert result.error_description == "Unknown token_type: mac"


def test_error_redirect_reaches_callback():
    """Test Dropbox error redirects are delivered as AuthorizeErr."""
    on_authorize = MagicMock(return_value=({}, []))
    middleware = RedirectMiddleware(make_update(), on_authorize)

    middleware("https://app.example.com/#error=access_denied&error_description=no", {})

    result = on_authorize.call_args.args[0]
    assert result == AuthorizeErr(error="access_denied", error_description="no")


def test_with_authorization_decorator():
    """Test the decorator wraps an update function."""
    received = []

    def on_authorize(result, state):
        received.append(result)
        return state, []

    @with_authorization(on_authorize)
    def update(event, state):
        return state + 1, []

    assert isinstance(update, RedirectMiddleware)
    state, effects = update(AUTH_URL, 0)

    assert state == 1
    assert effects == []
    assert received[0].account_id == "a1"
