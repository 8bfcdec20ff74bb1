"""
Response decoders for the Dropbox token and files endpoints.
"""

import httpx
from pydantic import ValidationError

from dropbox_http.errors import MalformedResponseError
from dropbox_http.models.files import DownloadResponse, UploadResponse


def decode_revoke_response(response: httpx.Response) -> None:
    """The revoke endpoint answers with an empty body; nothing to decode."""
    return None


def decode_download_response(response: httpx.Response) -> DownloadResponse:
    """
    Wraps the raw body of a download.

    Args:
        response: Transport response

    Returns:
        DownloadResponse holding the file content
    """
    return DownloadResponse(content=response.content)


def decode_upload_response(
    body: httpx.Response | bytes | str,
    url: str | None = None,
) -> UploadResponse:
    """
    Decodes the file metadata returned by an upload.

    Args:
        body: Transport response or raw JSON body
        url: Originating request URL, taken from the response if omitted

    Returns:
        UploadResponse

    Raises:
        MalformedResponseError: If the body is not valid JSON or a required
            field is missing or has the wrong type
    """
    if isinstance(body, httpx.Response):
        if url is None:
            url = _request_url(body)
        body = body.content

    try:
        return UploadResponse.model_validate_json(body)
    except ValidationError as e:
        raise MalformedResponseError.from_validation_error(
            "UploadResponse", e, url=url
        ) from e


def _request_url(response: httpx.Response) -> str | None:
    # httpx raises RuntimeError for responses built without a request
    try:
        return str(response.request.url)
    except RuntimeError:
        return None
