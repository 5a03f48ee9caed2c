from typing import Any, Mapping

from smsprovider.aliyun import AliyunProvider
from smsprovider.exceptions import ConfigValidationError
from smsprovider.models.config import AliyunConfig
from smsprovider.provider import SmsProvider

PROVIDERS: dict[str, type[SmsProvider]] = {
    AliyunProvider.name: AliyunProvider,
}


def register_provider(provider_cls: type[SmsProvider]) -> type[SmsProvider]:
    """Make a provider class available to ``get_provider`` under its ``name``."""
    PROVIDERS[provider_cls.name] = provider_cls
    return provider_cls


def get_provider(
    name: str, config: AliyunConfig | Mapping[str, Any], **options: Any
) -> SmsProvider:
    """Build a ready provider, validating ``config`` before anything is sent.

    ``options`` are passed to the provider constructor (``timeout``,
    ``session``...).
    """
    if not isinstance(name, str):
        raise ConfigValidationError(
            f"sms provider name must be a string, got {type(name).__name__}",
            errors=[{"type": "string_type", "loc": ("provider",), "msg": repr(name)}],
        )
    provider_cls = PROVIDERS.get(name.lower())
    if provider_cls is None:
        raise ConfigValidationError(
            f"unsupported sms provider {name!r}",
            errors=[{"type": "unknown_provider", "loc": ("provider",), "msg": name}],
        )
    return provider_cls(config, **options)
