"""
OAuth 2.0 implicit grant models.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from dropbox_http.config import Settings
from dropbox_http.models.http import Location


class AuthorizeRequest(BaseModel):
    """Parameters of the Dropbox authorization URL."""

    model_config = ConfigDict(frozen=True)

    client_id: str = Field(..., description="Dropbox app key")
    redirect_uri: str = Field(..., description="Where Dropbox sends the token")

    @classmethod
    def from_settings(cls, settings: Settings) -> "AuthorizeRequest":
        """
        Build the request from configured credentials.

        Args:
            settings: Client configuration

        Returns:
            AuthorizeRequest with DROPBOX_CLIENT_ID and DROPBOX_REDIRECT_URI
        """
        return cls(
            client_id=settings.dropbox_client_id,
            redirect_uri=settings.dropbox_redirect_uri,
        )

    @classmethod
    def from_location(cls, client_id: str, location: Location) -> "AuthorizeRequest":
        """
        Build the request redirecting back to the current page.

        Query string and fragment of the location are dropped.

        Args:
            client_id: Dropbox app key
            location: Current browser location

        Returns:
            AuthorizeRequest whose redirect_uri is protocol, host and path
        """
        return cls(client_id=client_id, redirect_uri=location.origin_and_path)


class AuthorizeResponse(BaseModel):
    """Raw parameters of a successful implicit grant redirect."""

    model_config = ConfigDict(frozen=True)

    access_token: str
    token_type: str
    uid: str
    account_id: str


class UserAuth(BaseModel):
    """
    Validated bearer credential.

    The token is kept as a SecretStr so it does not leak through repr or
    log messages. Use ``user_auth_from_response`` to build one from a
    redirect; the token type is fixed to ``bearer``.
    """

    model_config = ConfigDict(frozen=True)

    access_token: SecretStr
    token_type: Literal["bearer"] = "bearer"

    @property
    def authorization_header(self) -> str:
        """Value of the Authorization header."""
        return f"Bearer {self.access_token.get_secret_value()}"

    @property
    def header_line(self) -> str:
        """Authorization header as it appears on the wire."""
        return f"Authorization: {self.authorization_header}"

    def headers(self) -> dict[str, str]:
        """Headers authenticating a request with this credential."""
        return {"Authorization": self.authorization_header}


class AuthorizeOk(BaseModel):
    """Authorization redirect carrying a usable credential."""

    model_config = ConfigDict(frozen=True)

    user_auth: UserAuth
    uid: str
    account_id: str


class AuthorizeErr(BaseModel):
    """Authorization redirect that did not produce a credential."""

    model_config = ConfigDict(frozen=True)

    error: str = Field(..., description="Error code, e.g. access_denied")
    error_description: str | None = Field(None, description="Details")


AuthorizeResult = AuthorizeOk | AuthorizeErr
