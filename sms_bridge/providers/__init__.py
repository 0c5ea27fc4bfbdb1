"""SMS gateway providers."""

from .base import SMSProvider
from .etxt import ETxtSMSProvider
from .transport import basic_auth_header, create_client

__all__ = ["SMSProvider", "ETxtSMSProvider", "basic_auth_header", "create_client"]
