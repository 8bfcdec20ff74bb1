"""Global pytest configuration and fixtures for all tests."""

import os

import pytest

from dropbox_http.models.auth import UserAuth


@pytest.fixture(scope="session", autouse=True)
def set_test_env_vars():
    """
    Set environment variables for testing.

    These are NOT real credentials - just placeholders for testing.
    """
    original_env = {}

    test_env_vars = {
        "DROPBOX_CLIENT_ID": "test-dropbox-client-id",
        "DROPBOX_REDIRECT_URI": "http://localhost:8000/",
        "LOG_LEVEL": "DEBUG",
    }

    for key, value in test_env_vars.items():
        original_env[key] = os.environ.get(key)
        os.environ[key] = value

    yield

    for key, original_value in original_env.items():
        if original_value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = original_value


@pytest.fixture
def user_auth():
    """Bearer credential with a dummy token."""
    return UserAuth(access_token="test-access-token")


@pytest.fixture
def upload_response_json():
    """Full /2/files/upload response as documented by Dropbox."""
    return {
        "name": "Prime_Numbers.txt",
        "id": "id:a4ayc_80_OEAAAAAAAAAXw",
        "client_modified": "2015-05-12T15:50:38Z",
        "server_modified": "2015-05-12T15:50:38Z",
        "rev": "a1c10ce0dd78",
        "size": 7212,
        "path_lower": "/homework/math/prime_numbers.txt",
        "path_display": "/Homework/math/Prime_Numbers.txt",
        "sharing_info": {
            "read_only": True,
            "parent_shared_folder_id": "84528192421",
            "modified_by": "dbid:AAH4f99T0taONIb-OurWxbNQ6ywGRopQngc",
        },
        "is_downloadable": True,
        "property_groups": [
            {
                "template_id": "ptid:1a5n2i6d3OYEAAAAAAAAAYa",
                "fields": [
                    {"name": "Security Policy", "value": "Confidential"}
                ],
            }
        ],
        "has_explicit_shared_members": False,
        "content_hash": "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
    }
