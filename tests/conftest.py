from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
import requests

from smsprovider.aliyun import AliyunProvider
from smsprovider.models.config import AliyunConfig

FIXED_NONCE = "1700000000123456789"
FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

CONFIG_DATA = {
    "access_key_id": "test-key-id",
    "access_key_secret": "test-key-secret",
    "endpoint": "https://dysmsapi.aliyuncs.com/",
    "sign_name": "TestSign",
}


def make_response(body: str, status_code: int = 200) -> requests.Response:
    res = requests.Response()
    res.status_code = status_code
    res._content = body.encode("utf-8")
    res.encoding = "utf-8"
    return res


@pytest.fixture()
def config() -> AliyunConfig:
    return AliyunConfig(**CONFIG_DATA)


@pytest.fixture()
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture()
def provider(config, session) -> AliyunProvider:
    return AliyunProvider(
        config,
        session=session,
        nonce=lambda: FIXED_NONCE,
        clock=lambda: FIXED_NOW,
    )
