"""
OAuth 2.0 implicit grant for Dropbox.

Builds the authorization URL and turns the redirect fragment into a
validated bearer credential.
"""

from typing import Protocol

from dropbox_http.core.logging import logger
from dropbox_http.errors import UnknownTokenTypeError
from dropbox_http.models.auth import (
    AuthorizeErr,
    AuthorizeOk,
    AuthorizeRequest,
    AuthorizeResponse,
    AuthorizeResult,
    UserAuth,
)
from dropbox_http.models.http import Location
from dropbox_http.utils.fragment import parse_fragment

AUTH_URL = "https://www.dropbox.com/oauth2/authorize"

REQUIRED_KEYS = ("access_token", "token_type", "uid", "account_id")


class Navigator(Protocol):
    """Host environment able to replace the current page."""

    def load(self, url: str) -> None: ...


def authorization_url(request: AuthorizeRequest) -> str:
    """
    Generates the Dropbox authorization URL for the implicit grant.

    client_id and redirect_uri are inserted verbatim; callers must
    percent-encode them beforehand if they contain reserved characters.

    Args:
        request: App key and redirect URI

    Returns:
        str: Complete authorization URL for user redirect
    """
    return (
        f"{AUTH_URL}?response_type=token"
        f"&client_id={request.client_id}"
        f"&redirect_uri={request.redirect_uri}"
    )


def authorize(request: AuthorizeRequest, navigator: Navigator) -> str:
    """
    Sends the browser to the Dropbox authorization page.

    Args:
        request: App key and redirect URI
        navigator: Host environment that performs the navigation

    Returns:
        The URL the navigator was asked to load
    """
    url = authorization_url(request)
    logger.info(f"Redirecting to Dropbox authorization for client {request.client_id}")
    navigator.load(url)
    return url


def parse_authorize_response(params: dict[str, str]) -> AuthorizeResponse | None:
    """
    Extracts the implicit grant parameters from a parsed fragment.

    Args:
        params: Output of parse_fragment

    Returns:
        AuthorizeResponse, or None if any required key is missing
        (the page was not loaded by an authorization redirect)
    """
    if not all(key in params for key in REQUIRED_KEYS):
        return None
    return AuthorizeResponse(
        access_token=params["access_token"],
        token_type=params["token_type"],
        uid=params["uid"],
        account_id=params["account_id"],
    )


def user_auth_from_response(response: AuthorizeResponse) -> UserAuth:
    """
    Validates the token type and builds the bearer credential.

    Args:
        response: Raw redirect parameters

    Returns:
        UserAuth for the access token

    Raises:
        UnknownTokenTypeError: If token_type is not exactly "bearer"
    """
    if response.token_type != "bearer":
        raise UnknownTokenTypeError(response.token_type)
    return UserAuth(access_token=response.access_token)


def parse_authorize_error(params: dict[str, str]) -> AuthorizeErr | None:
    """
    Recognises the error redirect Dropbox sends when authorization fails.

    Args:
        params: Output of parse_fragment

    Returns:
        AuthorizeErr, or None if the fragment carries no ``error`` key
    """
    if "error" not in params:
        return None
    return AuthorizeErr(
        error=params["error"],
        error_description=params.get("error_description"),
    )


def authorize_result_from_fragment(
    fragment: str | Location | None,
) -> AuthorizeResult | None:
    """
    Runs fragment parsing and validation in one step.

    Args:
        fragment: Redirect fragment or Location

    Returns:
        AuthorizeOk on a valid bearer token, AuthorizeErr on an error
        redirect or unsupported token type, None when the fragment is not
        an authorization redirect
    """
    params = parse_fragment(fragment)

    response = parse_authorize_response(params)
    if response is None:
        return parse_authorize_error(params)

    try:
        user_auth = user_auth_from_response(response)
    except UnknownTokenTypeError as e:
        logger.warning(f"Rejected authorization redirect: {e}")
        return AuthorizeErr(error="unknown_token_type", error_description=str(e))

    return AuthorizeOk(
        user_auth=user_auth,
        uid=response.uid,
        account_id=response.account_id,
    )
