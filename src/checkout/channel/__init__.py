"""Notification channel port and adapters."""

from checkout.channel.fake_email import FakeEmailNotifier
from checkout.channel.notifier_port import Notifier

__all__ = ["FakeEmailNotifier", "Notifier"]
