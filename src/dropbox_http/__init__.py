"""
Typed client binding for the Dropbox HTTP API.

Covers the OAuth 2.0 implicit grant (authorization URL and redirect
fragment parsing) plus the token revoke, download and upload endpoints.
"""

from loguru import logger

from dropbox_http.errors import (
    DropboxHttpError,
    MalformedResponseError,
    UnknownTokenTypeError,
)
from dropbox_http.middleware.redirect import RedirectMiddleware, with_authorization
from dropbox_http.models.auth import (
    AuthorizeErr,
    AuthorizeOk,
    AuthorizeRequest,
    AuthorizeResponse,
    UserAuth,
)
from dropbox_http.models.files import (
    DownloadRequest,
    DownloadResponse,
    UploadRequest,
    UploadResponse,
    WriteMode,
)
from dropbox_http.models.http import HttpRequest, Location
from dropbox_http.services.client import DropboxClient
from dropbox_http.services.decoders import (
    decode_download_response,
    decode_revoke_response,
    decode_upload_response,
)
from dropbox_http.services.oauth import (
    authorization_url,
    authorize,
    authorize_result_from_fragment,
    parse_authorize_error,
    parse_authorize_response,
    user_auth_from_response,
)
from dropbox_http.services.requests import (
    build_download_request,
    build_revoke_request,
    build_upload_request,
)
from dropbox_http.utils.fragment import parse_fragment

# Library logging stays off until the application calls logger.enable("dropbox_http")
logger.disable("dropbox_http")

__version__ = "1.0.0"

__all__ = [
    # Errors
    "DropboxHttpError",
    "MalformedResponseError",
    "UnknownTokenTypeError",
    # Models
    "AuthorizeErr",
    "AuthorizeOk",
    "AuthorizeRequest",
    "AuthorizeResponse",
    "DownloadRequest",
    "DownloadResponse",
    "HttpRequest",
    "Location",
    "UploadRequest",
    "UploadResponse",
    "UserAuth",
    "WriteMode",
    # OAuth
    "authorization_url",
    "authorize",
    "authorize_result_from_fragment",
    "parse_authorize_error",
    "parse_authorize_response",
    "parse_fragment",
    "user_auth_from_response",
    # Requests and decoders
    "build_download_request",
    "build_revoke_request",
    "build_upload_request",
    "decode_download_response",
    "decode_revoke_response",
    "decode_upload_response",
    # Client and middleware
    "DropboxClient",
    "RedirectMiddleware",
    "with_authorization",
]
