"""
Async transport for Dropbox API requests.

Executes the HttpRequest descriptors produced by the request builders
with httpx and feeds the responses to the decoders. Transport and HTTP
status errors propagate unchanged as httpx exceptions.
"""

import httpx

from dropbox_http.config import Settings, get_settings
from dropbox_http.core.logging import logger
from dropbox_http.core.trace_context import traced_call
from dropbox_http.models.auth import UserAuth
from dropbox_http.models.files import (
    DownloadRequest,
    DownloadResponse,
    UploadRequest,
    UploadResponse,
)
from dropbox_http.models.http import HttpRequest
from dropbox_http.services.decoders import (
    decode_download_response,
    decode_revoke_response,
    decode_upload_response,
)
from dropbox_http.services.requests import (
    build_download_request,
    build_revoke_request,
    build_upload_request,
)


class DropboxClient:
    """
    Client for the Dropbox token revoke, download and upload endpoints.

    A shared httpx.AsyncClient may be injected; otherwise a short-lived
    client is opened for every call.

    Attributes:
        settings: Client configuration (timeout)
    """

    def __init__(
        self,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initializes the client.

        Args:
            settings: Client configuration, cached settings if omitted
            http_client: Optional shared httpx client
        """
        self.settings = settings or get_settings()
        self._http_client = http_client

    async def send(self, request: HttpRequest) -> httpx.Response:
        """
        Executes a request descriptor.

        Args:
            request: Request built by one of the request builders

        Returns:
            httpx.Response with a 2xx status

        Raises:
            httpx.HTTPStatusError: If Dropbox answers with an error status
            httpx.HTTPError: On transport failures
        """
        with traced_call():
            try:
                logger.debug(f"{request.method} {request.url}")
                response = await self._request(request)
                response.raise_for_status()
                logger.debug(f"{request.url} -> {response.status_code}")
                return response
            except httpx.HTTPStatusError as e:
                logger.error(
                    f"Dropbox returned {e.response.status_code} for {request.url}: "
                    f"{e.response.text[:200]}"
                )
                raise
            except httpx.HTTPError as e:
                logger.error(f"Transport error calling {request.url}: {e}")
                raise

    async def _request(self, request: HttpRequest) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
            )

        async with httpx.AsyncClient(timeout=self.settings.http_timeout) as client:
            return await client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
            )

    async def revoke_token(self, auth: UserAuth) -> None:
        """
        Revokes the access token.

        Args:
            auth: Credential to revoke
        """
        with traced_call():
            response = await self.send(build_revoke_request(auth))
            logger.info("Dropbox access token revoked")
            return decode_revoke_response(response)

    async def download(
        self, auth: UserAuth, request: DownloadRequest
    ) -> DownloadResponse:
        """
        Downloads a file.

        Args:
            auth: Credential of the file owner
            request: File to download

        Returns:
            DownloadResponse with the raw file content
        """
        with traced_call():
            response = await self.send(build_download_request(auth, request))
            result = decode_download_response(response)
            logger.info(f"Downloaded {request.path} ({len(result.content)} bytes)")
            return result

    async def upload(self, auth: UserAuth, request: UploadRequest) -> UploadResponse:
        """
        Uploads a file.

        Args:
            auth: Credential of the destination Dropbox
            request: Destination, conflict behaviour and content

        Returns:
            UploadResponse with the metadata of the stored file

        Raises:
            MalformedResponseError: If the metadata cannot be decoded
        """
        http_request = build_upload_request(auth, request)
        with traced_call():
            response = await self.send(http_request)
            result = decode_upload_response(response, url=http_request.url)
            logger.info(
                f"Uploaded {result.path_display or request.path} (rev {result.rev})"
            )
            return result
