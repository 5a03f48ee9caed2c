from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing_extensions import Annotated

DEFAULT_ENDPOINT = "https://dysmsapi.aliyuncs.com/"


class AliyunConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    access_key_id: Annotated[str, Field(strict=True, min_length=1)]
    access_key_secret: Annotated[str, Field(strict=True, min_length=1, repr=False)]
    endpoint: Annotated[str, Field(strict=True, min_length=1)] = DEFAULT_ENDPOINT
    sign_name: Annotated[str, Field(strict=True, min_length=1)]
    # Uplink extend code, only sent when set.
    sms_up_extend_code: str = ""

    @field_validator(
        "access_key_id", "access_key_secret", "endpoint", "sign_name", "sms_up_extend_code"
    )
    @classmethod
    def check_no_surrounding_whitespace(cls, v: str) -> str:
        # Values are signed as given; a stray space changes the signing key.
        if v != v.strip():
            raise ValueError("must not have leading or trailing whitespace")
        return v

    @field_validator("endpoint")
    @classmethod
    def check_endpoint(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("endpoint must be an http(s) URL")
        return v
