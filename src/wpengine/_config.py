from pydantic import BaseModel, ConfigDict, HttpUrl, field_validator

from ._utils.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    password: str
    base_url: str = DEFAULT_BASE_URL
    timeout: int = DEFAULT_TIMEOUT
    strict_decode: bool = False

    @field_validator("username", "password")
    @classmethod
    def validate_credential(cls, value: str) -> str:
        if not value:
            raise ValueError("must be a non-empty string")
        return value

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_url(cls, value: str) -> str:
        # https://api.wpengineapi.com/v0/
        url_value = HttpUrl(url=value)
        assert url_value.scheme in ("http", "https"), "Invalid URL"
        return value if value.endswith("/") else f"{value}/"

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be a positive number of seconds")
        return value
