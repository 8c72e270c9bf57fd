"""Notifier port: abstract interface for dispatching a message to an address."""

from abc import ABC, abstractmethod


class Notifier(ABC):
    """Abstract interface for notification adapters."""

    @abstractmethod
    async def send(self, address: str, subject: str, body: str) -> None:
        """Send a message.

        Raises on delivery faults; the checkout service does not inspect any
        return value.
        """
        ...
