from typing import Any


class SMSResult:
    def __init__(
        self,
        phone: str,
        provider: str,
        message_id: str,
        request_id: str | None = None,
        status: str = "success",
        message: str = "",
    ) -> None:
        self.phone = phone
        self.provider = provider
        self.message_id = message_id
        self.request_id = request_id
        self.status = status
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {
            "phone": self.phone,
            "provider": self.provider,
            "message_id": self.message_id,
            "request_id": self.request_id,
            "status": self.status,
            "message": self.message,
        }

    def __repr__(self) -> str:
        return (
            f"<SMSResult provider={self.provider} status={self.status} "
            f"message_id={self.message_id}>"
        )
