import pytest

from smsprovider import registry
from smsprovider.aliyun import AliyunProvider
from smsprovider.exceptions import ConfigValidationError, UnsupportedCapabilityError
from smsprovider.models.result import SMSResult
from smsprovider.provider import Channel, SmsProvider
from smsprovider.registry import get_provider, register_provider

from .conftest import CONFIG_DATA


class EchoProvider(SmsProvider):
    name = "echo"

    def __init__(self, config, **options):
        self.config = config

    def send_message(self, phone, message, channel, otp):
        return SMSResult(phone=phone, provider=self.name, message_id=otp)


def test_get_provider_aliyun(session):
    provider = get_provider("aliyun", CONFIG_DATA, session=session, timeout=3)

    assert isinstance(provider, AliyunProvider)
    assert provider.timeout == 3
    assert provider.config.sign_name == "TestSign"


def test_get_provider_is_case_insensitive(session):
    assert isinstance(get_provider("Aliyun", CONFIG_DATA, session=session), AliyunProvider)


def test_unknown_provider():
    with pytest.raises(ConfigValidationError) as exc_info:
        get_provider("carrier-pigeon", CONFIG_DATA)

    assert "carrier-pigeon" in str(exc_info.value)


def test_missing_field_reports_location(session):
    data = {k: v for k, v in CONFIG_DATA.items() if k != "sign_name"}

    with pytest.raises(ConfigValidationError) as exc_info:
        get_provider("aliyun", data, session=session)

    assert [e["loc"] for e in exc_info.value.errors] == [("sign_name",)]
    assert exc_info.value.to_dict()["kind"] == "config_validation"
    session.post.assert_not_called()


def test_register_provider(monkeypatch):
    monkeypatch.setattr(registry, "PROVIDERS", dict(registry.PROVIDERS))

    register_provider(EchoProvider)
    provider = get_provider("echo", {})

    assert provider.send_message("123", "hi", Channel.SMS, "9999").message_id == "9999"


def test_verify_otp_defaults_to_unsupported():
    with pytest.raises(UnsupportedCapabilityError) as exc_info:
        EchoProvider({}).verify_otp("123", "9999")

    assert exc_info.value.provider == "echo"


@pytest.mark.parametrize("name", [None, 42, ["aliyun"]])
def test_non_string_provider_name(name, session):
    with pytest.raises(ConfigValidationError) as exc_info:
        get_provider(name, CONFIG_DATA, session=session)

    assert exc_info.value.errors[0]["loc"] == ("provider",)
