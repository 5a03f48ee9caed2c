import logging
from datetime import datetime
from typing import Any, Callable, Mapping

import requests
from pydantic import ValidationError

from smsprovider.aliyun_api import AliyunAPI, default_nonce
from smsprovider.exceptions import (
    ConfigValidationError,
    InvalidMessageError,
    ResponseDecodeError,
    TransportError,
    UnsupportedCapabilityError,
    UnsupportedChannelError,
    VendorRejectionError,
)
from smsprovider.models.config import AliyunConfig
from smsprovider.models.result import SMSResult
from smsprovider.models.sms_model import OutboundMessage, SendSmsResponse, SignedRequest
from smsprovider.provider import DEFAULT_TIMEOUT, Channel, SmsProvider
from smsprovider.signcode import sign_params
from smsprovider.utils import mask_phone

logger = logging.getLogger(__name__)


def validate_config(config: AliyunConfig | Mapping[str, Any]) -> AliyunConfig:
    if isinstance(config, AliyunConfig):
        return config
    try:
        return AliyunConfig(**config)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_input=False)
        logger.error(f"Invalid Aliyun configuration: {errors}")
        raise ConfigValidationError(
            "Invalid Aliyun SMS configuration", provider=AliyunProvider.name, errors=errors
        ) from e


class AliyunProvider(AliyunAPI, SmsProvider):
    """Aliyun Dysms ``SendSms`` with RPC request signing.

    Doc: https://help.aliyun.com/zh/sms/developer-reference/api-dysmsapi-2017-05-25-sendsms
    """

    name = "aliyun"

    def __init__(
        self,
        config: AliyunConfig | Mapping[str, Any],
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
        nonce: Callable[[], str] = default_nonce,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        super().__init__(validate_config(config), nonce=nonce, clock=clock)
        if timeout <= 0:
            raise ConfigValidationError("timeout must be positive", provider=self.name)
        self.timeout = timeout
        self._owns_session = session is None
        self._session = session or requests.Session()

    def send_message(
        self, phone: str, message: str, channel: str, otp: str
    ) -> SMSResult:
        if channel != Channel.SMS:
            raise UnsupportedChannelError(self.name, channel)
        return self.send_sms(phone, message, otp)

    def send_sms(self, phone: str, template_code: str, otp: str) -> SMSResult:
        try:
            outbound = OutboundMessage(
                phone=phone, channel=Channel.SMS, otp=otp, template_code=template_code
            )
        except ValidationError as e:
            raise InvalidMessageError(
                "Invalid SMS request",
                self.name,
                errors=e.errors(include_url=False, include_input=False),
            ) from e

        signed = self.sign(outbound)
        logger.debug(
            f"Sending Aliyun SMS | phone={mask_phone(phone)} nonce={signed.nonce}"
        )
        res = self.post_request(signed)
        return self._handle_response(res, phone)

    def sign(self, message: OutboundMessage) -> SignedRequest:
        return sign_params(self.build_params(message), self.config.access_key_secret)

    def post_request(self, signed: SignedRequest) -> requests.Response:
        try:
            return self._session.post(
                url=self.config.endpoint,
                headers=self.headers,
                data=signed.form_data(),
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"Aliyun SMS request timed out after {self.timeout}s: {e}")
            raise TransportError(
                f"Aliyun SMS request timed out after {self.timeout}s",
                provider=self.name,
                timeout=True,
            ) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error: {e}")
            raise TransportError(
                f"failed to send SMS via Aliyun: {e}", provider=self.name
            ) from e

    def _handle_response(self, res: requests.Response, phone: str) -> SMSResult:
        try:
            data = res.json()
        except ValueError as e:
            logger.error(
                f"Undecodable response from Aliyun ({res.status_code}): {res.text[:200]}"
            )
            raise ResponseDecodeError(
                "failed to decode response", self.name, res.status_code, res.text
            ) from e

        try:
            response_data = SendSmsResponse.model_validate(data)
        except ValidationError as e:
            logger.error(f"Validation error: {e.errors()}")
            raise ResponseDecodeError(
                "unexpected response shape", self.name, res.status_code, res.text
            ) from e

        if not response_data.is_success:
            logger.error(
                f"Aliyun rejected SMS | phone={mask_phone(phone)} "
                f"code={response_data.Code} request_id={response_data.RequestId}"
            )
            raise VendorRejectionError(
                self.name,
                response_data.Code,
                response_data.Message or "",
                request_id=response_data.RequestId,
                status_code=res.status_code,
            )

        return SMSResult(
            phone=phone,
            provider=self.name,
            message_id=response_data.BizId or "",
            request_id=response_data.RequestId,
            message=response_data.Message or "",
        )

    def verify_otp(self, phone: str, otp: str) -> None:
        raise UnsupportedCapabilityError(self.name, "OTP verification")

    def close(self) -> None:
        """Close the HTTP session if this provider created it."""
        if self._owns_session:
            self._session.close()
