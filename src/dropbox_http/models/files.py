"""
File request and metadata models for the Dropbox files endpoints.

Tagged unions use Dropbox's literal ``.tag`` discriminator. Response
models decode strictly: a required field with the wrong JSON type fails
the whole decode, optional fields default to None when absent or null.
"""

from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

UInt64 = Annotated[int, Field(ge=0, le=2**64 - 1)]


# ============================================================================
# WRITE MODE
# ============================================================================


class _Tagged(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class WriteModeAdd(_Tagged):
    """Never overwrite an existing file."""

    tag: Literal["add"] = Field("add", alias=".tag")


class WriteModeOverwrite(_Tagged):
    """Always overwrite an existing file."""

    tag: Literal["overwrite"] = Field("overwrite", alias=".tag")


class WriteModeUpdate(_Tagged):
    """Overwrite only if the current revision matches ``update``."""

    tag: Literal["update"] = Field("update", alias=".tag")
    update: str = Field(..., description="Expected revision of the file")


WriteMode = Annotated[
    WriteModeAdd | WriteModeOverwrite | WriteModeUpdate,
    Field(discriminator="tag"),
]


# ============================================================================
# REQUESTS
# ============================================================================


class DownloadRequest(BaseModel):
    """Arguments of /2/files/download."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Path, id or rev of the file")


class UploadRequest(BaseModel):
    """Arguments and content of /2/files/upload."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Destination path in the user's Dropbox")
    mode: WriteMode = Field(default_factory=WriteModeAdd)
    autorename: bool = Field(
        default=False, description="Rename instead of failing on conflict"
    )
    client_modified: datetime | None = Field(
        default=None, description="Modification time reported by the client"
    )
    mute: bool = Field(default=False, description="Suppress user notifications")
    content: bytes = Field(default=b"", description="File content")


# ============================================================================
# RESPONSES
# ============================================================================


class _Response(BaseModel):
    model_config = ConfigDict(
        strict=True, frozen=True, extra="ignore", populate_by_name=True
    )


class DownloadResponse(_Response):
    """Content returned by /2/files/download."""

    content: bytes


class Dimensions(_Response):
    height: UInt64
    width: UInt64


class GpsCoordinates(_Response):
    latitude: float
    longitude: float


class PhotoMetadata(_Response):
    tag: Literal["photo"] = Field("photo", alias=".tag")
    dimensions: Dimensions | None = None
    location: GpsCoordinates | None = None
    time_taken: datetime | None = None


class VideoMetadata(_Response):
    tag: Literal["video"] = Field("video", alias=".tag")
    dimensions: Dimensions | None = None
    location: GpsCoordinates | None = None
    time_taken: datetime | None = None
    duration: UInt64 | None = Field(None, description="Duration in milliseconds")


MediaMetadata = Annotated[
    PhotoMetadata | VideoMetadata,
    Field(discriminator="tag"),
]


class MediaInfoPending(_Response):
    """Dropbox has not extracted the media metadata yet."""

    tag: Literal["pending"] = Field("pending", alias=".tag")


class MediaInfoMetadata(_Response):
    tag: Literal["metadata"] = Field("metadata", alias=".tag")
    metadata: MediaMetadata


MediaInfo = Annotated[
    MediaInfoPending | MediaInfoMetadata,
    Field(discriminator="tag"),
]


class FileSharingInfo(_Response):
    read_only: bool
    parent_shared_folder_id: str
    modified_by: str | None = None


class PropertyField(_Response):
    name: str
    value: str


class PropertyGroup(_Response):
    template_id: str
    fields: list[PropertyField]


class UploadResponse(_Response):
    """
    Metadata of the file written by /2/files/upload.

    ``size`` is an unsigned 64-bit integer; Python ints hold it exactly.
    """

    name: str
    id: str
    client_modified: datetime
    server_modified: datetime
    rev: str
    size: UInt64
    path_lower: str | None = None
    path_display: str | None = None
    parent_shared_folder_id: str | None = None
    media_info: MediaInfo | None = None
    sharing_info: FileSharingInfo | None = None
    property_groups: list[PropertyGroup] | None = None
    has_explicit_shared_members: bool | None = None
    content_hash: str | None = None
