"""Transport client configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TransportSettings(BaseModel):
    """Connection-level options shared by every request of a TransportClient."""

    model_config = ConfigDict(frozen=True)

    timeout: float = Field(default=10, gt=0)
    verify_certs: bool = True
    ssl_show_warn: bool = True
    http_compress: bool = False
    http_auth: tuple[str, str] | None = None
    headers: dict[str, str] = Field(default_factory=dict)
    # Some proxies drop GET bodies; "POST" rewrites search/msearch requests
    send_get_body_as: Literal["GET", "POST"] = "GET"

    @field_validator("headers")
    @classmethod
    def normalize_headers(cls, v: dict[str, str]) -> dict[str, str]:
        """Lower-case header names so they merge with the connection defaults."""
        return {name.lower(): value for name, value in v.items()}
