from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Annotated


class OutboundMessage(BaseModel):
    phone: Annotated[str, Field(strict=True)]
    channel: str
    otp: Annotated[str, Field(strict=True)]
    template_code: Annotated[str, Field(strict=True, min_length=1)]


class SignedRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    params: dict[str, str]
    signature: str
    timestamp: str
    nonce: str

    def form_data(self) -> dict[str, str]:
        return {**self.params, "Signature": self.signature}


class SendSmsResponse(BaseModel):
    BizId: str | None = Field(default=None)
    Code: str
    Message: str | None = Field(default=None)
    RequestId: str | None = Field(default=None)

    @property
    def is_success(self) -> bool:
        return self.Code == "OK"
