"""Agora RTC/RTM token issuance service."""

__version__ = "0.1.0"
