from typing import Any


class SmsProviderError(Exception):
    """Base exception for SMS provider errors."""

    kind = "sms_provider"
    retryable: bool | None = False

    def __init__(self, message: str, provider: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.provider = provider

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "provider": self.provider, "message": self.message}


class ConfigValidationError(SmsProviderError):
    kind = "config_validation"

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message, provider)
        self.errors = errors or []

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "errors": self.errors}


class UnsupportedChannelError(SmsProviderError):
    kind = "unsupported_channel"

    def __init__(self, provider: str, channel: str) -> None:
        super().__init__(
            f"channel type {channel!r} is not supported by {provider}", provider
        )
        self.channel = channel


class UnsupportedCapabilityError(SmsProviderError):
    kind = "unsupported_capability"

    def __init__(self, provider: str, capability: str) -> None:
        super().__init__(f"{capability} is not supported by {provider}", provider)
        self.capability = capability


class TransportError(SmsProviderError):
    kind = "transport"
    retryable = True

    def __init__(self, message: str, provider: str, timeout: bool = False) -> None:
        super().__init__(message, provider)
        self.timeout = timeout

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "timeout": self.timeout}


class ResponseDecodeError(SmsProviderError):
    kind = "response_decode"

    def __init__(
        self, message: str, provider: str, status_code: int | None, body: str = ""
    ) -> None:
        super().__init__(message, provider)
        self.status_code = status_code
        self.body = body[:200]

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "status_code": self.status_code, "body": self.body}


class VendorRejectionError(SmsProviderError):
    kind = "vendor_rejection"
    # Whether a vendor code is worth retrying is up to the caller.
    retryable = None

    def __init__(
        self,
        provider: str,
        code: str,
        vendor_message: str,
        request_id: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(
            f"{provider} SMS error: Code={code}, Message={vendor_message}", provider
        )
        self.code = code
        self.vendor_message = vendor_message
        self.request_id = request_id
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "code": self.code,
            "vendor_message": self.vendor_message,
            "request_id": self.request_id,
            "status_code": self.status_code,
        }


class InvalidMessageError(SmsProviderError):
    kind = "invalid_message"

    def __init__(
        self, message: str, provider: str, errors: list[dict[str, Any]] | None = None
    ) -> None:
        super().__init__(message, provider)
        self.errors = errors or []
