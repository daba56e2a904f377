"""Email notification adapter."""

from .client import (
    EmailNotifier,
    HttpEmailNotifier,
    MockEmailNotifier,
    SentEmail,
)

__all__ = ["EmailNotifier", "HttpEmailNotifier", "MockEmailNotifier", "SentEmail"]
