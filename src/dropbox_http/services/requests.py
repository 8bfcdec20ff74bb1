"""
Request builders for the Dropbox token and files endpoints.

Builders are pure: they return an HttpRequest and never touch the
network. Parameters of content endpoints travel as compact JSON in the
Dropbox-API-Arg header, ASCII-escaped because HTTP header values must be.
"""

import json
from datetime import UTC, datetime
from typing import Any

from dropbox_http.models.auth import UserAuth
from dropbox_http.models.files import DownloadRequest, UploadRequest
from dropbox_http.models.http import HttpRequest

API_URL = "https://api.dropboxapi.com/2"
CONTENT_URL = "https://content.dropboxapi.com/2"

REVOKE_URL = f"{API_URL}/auth/token/revoke"
DOWNLOAD_URL = f"{CONTENT_URL}/files/download"
UPLOAD_URL = f"{CONTENT_URL}/files/upload"

API_ARG_HEADER = "Dropbox-API-Arg"


def encode_api_arg(arg: dict[str, Any]) -> str:
    """Compact JSON for the Dropbox-API-Arg header."""
    return json.dumps(arg, separators=(",", ":"))


def format_timestamp(value: datetime) -> str:
    """
    Formats a datetime the way Dropbox expects it (``%Y-%m-%dT%H:%M:%SZ``).

    Naive datetimes are taken as UTC; sub-second precision is dropped.
    """
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


def upload_api_arg(request: UploadRequest) -> dict[str, Any]:
    """
    Dropbox-API-Arg payload of an upload.

    client_modified is only included when set.
    """
    arg: dict[str, Any] = {
        "path": request.path,
        "mode": request.mode.model_dump(by_alias=True),
        "autorename": request.autorename,
    }
    if request.client_modified is not None:
        arg["client_modified"] = format_timestamp(request.client_modified)
    arg["mute"] = request.mute
    return arg


def build_revoke_request(auth: UserAuth) -> HttpRequest:
    """
    Builds the request revoking the access token.

    Args:
        auth: Credential to revoke

    Returns:
        HttpRequest for /2/auth/token/revoke
    """
    return HttpRequest(method="POST", url=REVOKE_URL, headers=auth.headers())


def build_download_request(auth: UserAuth, request: DownloadRequest) -> HttpRequest:
    """
    Builds the request downloading a file.

    Args:
        auth: Credential of the file owner
        request: File to download

    Returns:
        HttpRequest for /2/files/download
    """
    headers = auth.headers()
    headers[API_ARG_HEADER] = encode_api_arg({"path": request.path})
    return HttpRequest(method="POST", url=DOWNLOAD_URL, headers=headers)


def build_upload_request(auth: UserAuth, request: UploadRequest) -> HttpRequest:
    """
    Builds the request uploading a file.

    Args:
        auth: Credential of the destination Dropbox
        request: Destination, conflict behaviour and content

    Returns:
        HttpRequest for /2/files/upload with the raw content as body
    """
    headers = auth.headers()
    headers[API_ARG_HEADER] = encode_api_arg(upload_api_arg(request))
    headers["Content-Type"] = "application/octet-stream"
    return HttpRequest(
        method="POST",
        url=UPLOAD_URL,
        headers=headers,
        body=request.content,
    )
