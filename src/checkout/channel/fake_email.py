"""Fake email notifier: records sent emails for testing."""

from uuid import uuid4

from checkout.channel.notifier_port import Notifier
from checkout.exceptions import NotificationDeliveryError


class FakeEmailNotifier(Notifier):
    """Email notifier that records messages in memory for test assertions."""

    def __init__(self):
        self.sent_emails: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Email delivery failed"):
        """Configure the fake notifier behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    async def send(self, address: str, subject: str, body: str) -> None:
        if not self.should_succeed:
            raise NotificationDeliveryError(self.failure_reason)

        self.sent_emails.append(
            {
                "message_id": f"email-{uuid4().hex[:12]}",
                "to": address,
                "subject": subject,
                "body": body,
            }
        )

    def reset(self):
        """Clear sent emails (useful between tests)."""
        self.sent_emails.clear()
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"
