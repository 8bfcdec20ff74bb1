"""
Error taxonomy for the Dropbox HTTP binding.

Transport failures are not wrapped: httpx exceptions reach the caller
unchanged. A fragment without authorization keys is not an error at all
and is reported as ``None`` by the OAuth helpers.
"""

from typing import Any

from pydantic import ValidationError


class DropboxHttpError(Exception):
    """Base class for errors raised by this package."""


class UnknownTokenTypeError(DropboxHttpError, ValueError):
    """The redirect carried a token_type other than ``bearer``."""

    def __init__(self, token_type: str):
        self.token_type = token_type
        super().__init__(f"Unknown token_type: {token_type}")


class MalformedResponseError(DropboxHttpError, ValueError):
    """
    A Dropbox response body could not be decoded.

    Attributes:
        url: URL of the request the body belongs to (if known)
        errors: Field-level errors reported by pydantic
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ):
        self.url = url
        self.errors = errors or []
        super().__init__(message if url is None else f"{message} ({url})")

    @classmethod
    def from_validation_error(
        cls, model_name: str, error: ValidationError, url: str | None = None
    ) -> "MalformedResponseError":
        """
        Build the error from a pydantic ValidationError.

        Args:
            model_name: Name of the model that failed to decode
            error: Original pydantic error
            url: URL of the originating request

        Returns:
            MalformedResponseError with the pydantic error details
        """
        locations = ", ".join(
            ".".join(str(part) for part in detail["loc"]) or "<root>"
            for detail in error.errors()
        )
        return cls(
            f"Malformed {model_name}: invalid or missing {locations}",
            url=url,
            errors=error.errors(include_url=False),
        )
