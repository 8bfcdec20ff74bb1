"""Tests for response decoders."""

import json
from datetime import datetime, timezone

import httpx
import pytest

from dropbox_http.errors import MalformedResponseError
from dropbox_http.models.files import (
    MediaInfoMetadata,
    MediaInfoPending,
    PhotoMetadata,
    VideoMetadata,
)
from dropbox_http.services.decoders import (
    decode_download_response,
    decode_revoke_response,
    decode_upload_response,
)

MINIMAL = {
    "name": "a.txt",
    "id": "id:1",
    "client_modified": "2017-01-02T03:04:05Z",
    "server_modified": "2017-01-02T03:04:06Z",
    "rev": "rev1",
    "size": 5,
}


def test_decode_upload_response_full(upload_response_json):
    """Test decoding a response with every optional field."""
    result = decode_upload_response(json.dumps(upload_response_json))

    assert result.name == "Prime_Numbers.txt"
    assert result.size == 7212
    assert result.client_modified == datetime(2015, 5, 12, 15, 50, 38, tzinfo=timezone.utc)
    assert result.path_lower == "/homework/math/prime_numbers.txt"
    assert result.sharing_info.read_only is True
    assert result.sharing_info.parent_shared_folder_id == "84528192421"
    assert result.property_groups[0].fields[0].value == "Confidential"
    assert result.has_explicit_shared_members is False
    assert result.content_hash.startswith("e3b0c442")


def test_decode_upload_response_optional_fields_absent():
    """Test missing optional keys decode as None."""
    result = decode_upload_response(json.dumps(MINIMAL))

    assert result.path_lower is None
    assert result.path_display is None
    assert result.media_info is None
    assert result.sharing_info is None
    assert result.property_groups is None
    assert result.content_hash is None


def test_decode_upload_response_optional_fields_null():
    """Test null optional values decode as None."""
    result = decode_upload_response(
        json.dumps({**MINIMAL, "path_lower": None, "media_info": None})
    )
    assert result.path_lower is None
    assert result.media_info is None


def test_decode_upload_response_missing_name():
    """Test a missing required field fails the decode."""
    body = json.dumps({k: v for k, v in MINIMAL.items() if k != "name"})
    with pytest.raises(MalformedResponseError, match="name"):
        decode_upload_response(body)


def test_decode_upload_response_wrong_type():
    """Test a mistyped required field fails the decode."""
    with pytest.raises(MalformedResponseError):
        decode_upload_response(json.dumps({**MINIMAL, "size": "5"}))


def test_decode_upload_response_invalid_json():
    """Test a non-JSON body is reported as malformed."""
    with pytest.raises(MalformedResponseError):
        decode_upload_response(b"<html>oops</html>")


def test_decode_upload_response_large_size():
    """Test sizes above 2**53 are kept exactly."""
    size = 2**64 - 1
    result = decode_upload_response(json.dumps({**MINIMAL, "size": size}))
    assert result.size == size


def test_decode_upload_response_negative_size():
    """Test negative sizes are rejected."""
    with pytest.raises(MalformedResponseError):
        decode_upload_response(json.dumps({**MINIMAL, "size": -1}))


def test_decode_media_info_pending():
    """Test pending media info."""
    result = decode_upload_response(
        json.dumps({**MINIMAL, "media_info": {".tag": "pending"}})
    )
    assert isinstance(result.media_info, MediaInfoPending)


def test_decode_media_info_photo():
    """Test photo metadata decoding."""
    media_info = {
        ".tag": "metadata",
        "metadata": {
            ".tag": "photo",
            "dimensions": {"height": 768, "width": 1024},
            "location": {"latitude": 10, "longitude": 20.5},
            "time_taken": "2015-05-12T15:50:38Z",
        },
    }
    result = decode_upload_response(json.dumps({**MINIMAL, "media_info": media_info}))

    assert isinstance(result.media_info, MediaInfoMetadata)
    photo = result.media_info.metadata
    assert isinstance(photo, PhotoMetadata)
    assert photo.dimensions.width == 1024
    assert photo.location.latitude == 10.0
    assert photo.time_taken.year == 2015


def test_decode_media_info_video():
    """Test video metadata with a 64-bit duration."""
    media_info = {
        ".tag": "metadata",
        "metadata": {".tag": "video", "duration": 2**60},
    }
    result = decode_upload_response(json.dumps({**MINIMAL, "media_info": media_info}))

    video = result.media_info.metadata
    assert isinstance(video, VideoMetadata)
    assert video.duration == 2**60
    assert video.dimensions is None


def test_decode_media_info_unknown_tag():
    """Test unknown media tags fail the decode."""
    with pytest.raises(MalformedResponseError):
        decode_upload_response(
            json.dumps({**MINIMAL, "media_info": {".tag": "audio"}})
        )


def test_decode_upload_response_error_carries_url():
    """Test the error points at the originating request."""
    request = httpx.Request("POST", "https://content.dropboxapi.com/2/files/upload")
    response = httpx.Response(200, content=b"{}", request=request)

    with pytest.raises(MalformedResponseError) as exc_info:
        decode_upload_response(response)

    assert exc_info.value.url == "https://content.dropboxapi.com/2/files/upload"
    assert exc_info.value.errors


def test_decode_download_response():
    """Test download content is returned raw."""
    response = httpx.Response(200, content=b"\x00\x01binary")
    assert decode_download_response(response).content == b"\x00\x01binary"


def test_decode_revoke_response():
    """Test revoke ignores the body."""
    assert decode_revoke_response(httpx.Response(200, json=None)) is None
