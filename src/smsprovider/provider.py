from abc import ABC, abstractmethod

from smsprovider.exceptions import UnsupportedCapabilityError
from smsprovider.models.result import SMSResult

# Seconds; shared by every provider unless overridden per instance.
DEFAULT_TIMEOUT = 10.0


class Channel:
    SMS = "sms"
    WHATSAPP = "whatsapp"


class SmsProvider(ABC):
    """Interface all one-way message providers implement."""

    name: str

    @abstractmethod
    def send_message(
        self, phone: str, message: str, channel: str, otp: str
    ) -> SMSResult:
        """Deliver ``otp`` to ``phone`` over ``channel``.

        Raises UnsupportedChannelError without touching the network when the
        provider does not handle ``channel``.
        """
        raise NotImplementedError

    def verify_otp(self, phone: str, otp: str) -> None:
        """Verify an OTP with the vendor, for providers that can."""
        raise UnsupportedCapabilityError(self.name, "OTP verification")
