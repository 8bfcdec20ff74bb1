"""
HTTP request descriptors and browser locations.
"""

from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field


class HttpRequest(BaseModel):
    """
    Fully specified HTTP request, ready to hand to a transport.

    Request builders only produce these; executing them is the job of
    the transport (see ``DropboxClient``).
    """

    model_config = ConfigDict(frozen=True)

    method: str = Field(default="POST", description="HTTP method")
    url: str = Field(..., description="Absolute request URL")
    headers: dict[str, str] = Field(default_factory=dict, description="Headers")
    body: bytes = Field(default=b"", description="Raw request body")


class Location(BaseModel):
    """
    Browser location, split the way ``window.location`` splits it.

    ``protocol`` keeps its trailing colon and ``hash`` its leading ``#``.
    """

    model_config = ConfigDict(frozen=True)

    protocol: str = Field(default="https:", description="Scheme with colon")
    host: str = Field(default="", description="Host and optional port")
    pathname: str = Field(default="/", description="Path")
    search: str = Field(default="", description="Query string with '?'")
    hash: str = Field(default="", description="Fragment with '#'")

    @classmethod
    def from_url(cls, url: str) -> "Location":
        """
        Split an absolute URL into a Location.

        Args:
            url: Absolute URL, e.g. the redirect target after authorization

        Returns:
            Location with the URL's parts
        """
        parts = urlsplit(url)
        return cls(
            protocol=f"{parts.scheme}:" if parts.scheme else "",
            host=parts.netloc,
            pathname=parts.path or "/",
            search=f"?{parts.query}" if parts.query else "",
            hash=f"#{parts.fragment}" if parts.fragment else "",
        )

    @property
    def origin_and_path(self) -> str:
        """Location without query string and fragment."""
        return f"{self.protocol}//{self.host}{self.pathname}"
