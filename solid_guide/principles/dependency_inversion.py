"""
Dependency Inversion: high-level policy depends on abstractions, and the
concrete details are chosen in one place, the composition root.
"""

from abc import ABC, abstractmethod


# Violation: the service builds its own concrete sender.


class SmtpEmailSender:
    def __init__(self):
        self.outbox: list[tuple[str, str]] = []

    def send_email(self, address: str, body: str) -> None:
        self.outbox.append((address, body))


class HardwiredNotificationService:
    def __init__(self):
        self.sender = SmtpEmailSender()

    def notify(self, recipient: str, message: str) -> None:
        self.sender.send_email(recipient, message)


# Adherence: the service receives any MessageSender.


class MessageSender(ABC):
    @abstractmethod
    def send(self, recipient: str, body: str) -> None:
        ...


class EmailSender(MessageSender):
    def __init__(self):
        self.outbox: list[tuple[str, str]] = []

    def send(self, recipient: str, body: str) -> None:
        self.outbox.append((recipient, f"Subject: Notification\n\n{body}"))


class SmsSender(MessageSender):
    def __init__(self):
        self.outbox: list[tuple[str, str]] = []

    def send(self, recipient: str, body: str) -> None:
        self.outbox.append((recipient, body[:160]))


class NotificationService:
    def __init__(self, sender: MessageSender):
        self.sender = sender

    def notify(self, recipient: str, message: str) -> None:
        self.sender.send(recipient, message)


def build_notification_service(channel: str) -> NotificationService:
    senders = {"email": EmailSender, "sms": SmsSender}
    if channel not in senders:
        raise ValueError(f"unknown channel: {channel}")
    return NotificationService(senders[channel]())
