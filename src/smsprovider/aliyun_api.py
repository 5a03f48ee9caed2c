import json
import threading
import time
from datetime import datetime, timezone
from typing import Callable

from smsprovider.models.config import AliyunConfig
from smsprovider.models.sms_model import OutboundMessage

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class NonceGenerator:
    """Decimal nanosecond clock readings, strictly increasing per process.

    Clocks with coarse resolution can return the same reading twice, in
    which case the previous value plus one is issued instead.
    """

    def __init__(self, clock_ns: Callable[[], int] = time.time_ns) -> None:
        self._clock_ns = clock_ns
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            value = max(self._clock_ns(), self._last + 1)
            self._last = value
        return str(value)


default_nonce = NonceGenerator()


def utc_timestamp(now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        # Naive clock readings are taken as UTC, not local time.
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


class AliyunAPI:
    action = "SendSms"
    version = "2017-05-25"
    response_format = "JSON"
    signature_method = "HMAC-SHA1"
    signature_version = "1.0"
    otp_template_key = "code"

    def __init__(
        self,
        config: AliyunConfig,
        nonce: Callable[[], str] = default_nonce,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.config = config
        self._nonce = nonce
        self._clock = clock
        self.headers = {"Content-Type": "application/x-www-form-urlencoded"}

    def template_param(self, otp: str) -> str:
        return json.dumps({self.otp_template_key: otp}, separators=(",", ":"))

    def build_params(self, message: OutboundMessage) -> dict[str, str]:
        params = {
            "Action": self.action,
            "Version": self.version,
            "AccessKeyId": self.config.access_key_id,
            "Format": self.response_format,
            "SignatureMethod": self.signature_method,
            "SignatureVersion": self.signature_version,
            "SignatureNonce": self._nonce(),
            "Timestamp": utc_timestamp(self._clock() if self._clock else None),
            "PhoneNumbers": message.phone,
            "SignName": self.config.sign_name,
            "TemplateCode": message.template_code,
            "TemplateParam": self.template_param(message.otp),
        }
        if self.config.sms_up_extend_code:
            params["SmsUpExtendCode"] = self.config.sms_up_extend_code
        return params
