from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from smsprovider.aliyun import AliyunProvider, validate_config
from smsprovider.exceptions import ConfigValidationError
from smsprovider.models.config import DEFAULT_ENDPOINT, AliyunConfig
from smsprovider.provider import DEFAULT_TIMEOUT


class AliyunSettings(BaseSettings):
    """Aliyun credentials read from ``SMS_ALIYUN_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="SMS_ALIYUN_", case_sensitive=False)

    access_key_id: str = ""
    access_key_secret: str = ""
    endpoint: str = DEFAULT_ENDPOINT
    sign_name: str = ""
    sms_up_extend_code: str = ""
    timeout: float = DEFAULT_TIMEOUT


def load_settings() -> AliyunSettings:
    try:
        return AliyunSettings()
    except ValidationError as e:
        raise ConfigValidationError(
            "Invalid SMS_ALIYUN_* environment",
            provider=AliyunProvider.name,
            errors=e.errors(include_url=False, include_input=False),
        ) from e


def load_aliyun_config() -> AliyunConfig:
    settings = load_settings()
    return validate_config(settings.model_dump(exclude={"timeout"}))


def provider_from_env(**options) -> AliyunProvider:
    settings = load_settings()
    options.setdefault("timeout", settings.timeout)
    return AliyunProvider(settings.model_dump(exclude={"timeout"}), **options)
