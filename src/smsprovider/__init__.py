import logging

from smsprovider.aliyun import AliyunProvider
from smsprovider.exceptions import (
    ConfigValidationError,
    InvalidMessageError,
    ResponseDecodeError,
    SmsProviderError,
    TransportError,
    UnsupportedCapabilityError,
    UnsupportedChannelError,
    VendorRejectionError,
)
from smsprovider.models.config import AliyunConfig
from smsprovider.models.result import SMSResult
from smsprovider.provider import DEFAULT_TIMEOUT, Channel, SmsProvider
from smsprovider.registry import get_provider, register_provider

__all__ = [
    "AliyunConfig",
    "AliyunProvider",
    "Channel",
    "ConfigValidationError",
    "DEFAULT_TIMEOUT",
    "InvalidMessageError",
    "ResponseDecodeError",
    "SMSResult",
    "SmsProvider",
    "SmsProviderError",
    "TransportError",
    "UnsupportedCapabilityError",
    "UnsupportedChannelError",
    "VendorRejectionError",
    "get_provider",
    "register_provider",
]

logging.getLogger("smsprovider").addHandler(logging.NullHandler())
