"""
Outbound email for account flows.

AccountService only depends on the Notifier protocol: something that accepts
a recipient address and a message body. EmailChannel is the in-process
implementation used by the demo, the API and the tests. It writes each
delivery to the "notifications" log instead of talking to a mail provider,
and keeps every attempt in `sent_messages` so callers can inspect what went
out (welcome bodies, login codes).

A channel built with a non-zero fail_rate reports some deliveries as failed.
Failures are recorded and returned, never raised; the account flows ignore
the outcome of a send.
"""

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Protocol

logger = logging.getLogger("notifications")
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter(
    "%(asctime)s | %(levelname)s | %(message)s",
    datefmt="%H:%M:%S"
))
logger.addHandler(handler)
logger.setLevel(logging.INFO)


DEFAULT_SENDER = "no-reply@storefront-demo.com"


@dataclass
class SentEmail:
    """One delivery attempt made by EmailChannel."""
    success: bool
    recipient: str
    subject: Optional[str]
    body: str
    timestamp: datetime = field(default_factory=datetime.now)
    error: Optional[str] = None

    def __str__(self) -> str:
        mark = "✓" if self.success else "✗"
        return f"{mark} EMAIL to {self.recipient}: {self.subject or self.body[:50]}"


class Notifier(Protocol):
    """Anything that can deliver a message body to a recipient address."""

    def send(self, to: str, body: str, subject: Optional[str] = None) -> object:
        ...


class EmailChannel:
    """
    Notifier that logs deliveries and remembers them.

    The recipient is not validated here; sign-up checks addresses before
    sending, login does not.
    """

    def __init__(self, fail_rate: float = 0.0, from_addr: str = DEFAULT_SENDER):
        self.fail_rate = fail_rate
        self.from_addr = from_addr
        self.sent_messages: list[SentEmail] = []

    def send(self, to: str, body: str, subject: Optional[str] = None) -> SentEmail:
        """Deliver `body` to `to` and record the attempt."""
        if random.random() < self.fail_rate:
            sent = SentEmail(
                success=False,
                recipient=to,
                subject=subject,
                body=body,
                error="Simulated email delivery failure",
            )
            logger.error(f"[EMAIL FAILED] To: {to} | Error: {sent.error}")
        else:
            sent = SentEmail(success=True, recipient=to, subject=subject, body=body)
            logger.info(f"[EMAIL] From: {self.from_addr} | To: {to} | Subject: {subject or '(none)'}")
            logger.debug(f"[EMAIL BODY] {body}")

        self.sent_messages.append(sent)
        return sent

    def get_sent_count(self) -> int:
        return len(self.sent_messages)
