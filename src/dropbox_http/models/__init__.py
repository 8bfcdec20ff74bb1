"""
Models package.

Typed request, response and credential models for the Dropbox HTTP API.
"""

from dropbox_http.models.auth import (
    AuthorizeErr,
    AuthorizeOk,
    AuthorizeRequest,
    AuthorizeResponse,
    AuthorizeResult,
    UserAuth,
)
from dropbox_http.models.files import (
    Dimensions,
    DownloadRequest,
    DownloadResponse,
    FileSharingInfo,
    GpsCoordinates,
    MediaInfo,
    MediaInfoMetadata,
    MediaInfoPending,
    MediaMetadata,
    PhotoMetadata,
    PropertyField,
    PropertyGroup,
    UploadRequest,
    UploadResponse,
    VideoMetadata,
    WriteMode,
    WriteModeAdd,
    WriteModeOverwrite,
    WriteModeUpdate,
)
from dropbox_http.models.http import HttpRequest, Location

__all__ = [
    # Auth
    "AuthorizeErr",
    "AuthorizeOk",
    "AuthorizeRequest",
    "AuthorizeResponse",
    "AuthorizeResult",
    "UserAuth",
    # Files
    "Dimensions",
    "DownloadRequest",
    "DownloadResponse",
    "FileSharingInfo",
    "GpsCoordinates",
    "MediaInfo",
    "MediaInfoMetadata",
    "MediaInfoPending",
    "MediaMetadata",
    "PhotoMetadata",
    "PropertyField",
    "PropertyGroup",
    "UploadRequest",
    "UploadResponse",
    "VideoMetadata",
    "WriteMode",
    "WriteModeAdd",
    "WriteModeOverwrite",
    "WriteModeUpdate",
    # HTTP
    "HttpRequest",
    "Location",
]
