"""
Dev Email Adapter (EmailPort Implementation).

Logs emails to console instead of sending.
Used for local development and testing.

Key behaviors:
- Logs recipient and a body preview
- Stores emails in memory for test assertions
- Rejects recipients without an "@"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

from kata.core.ports.email import EmailSendError, EmailValidationError

logger = logging.getLogger(__name__)


@dataclass
class SentEmail:
    """Record of a logged email for test assertions."""

    id: str
    recipient: str
    message: str
    logged_at: datetime


@dataclass
class DevEmailAdapter:
    """
    Dev email adapter that logs instead of sending.

    For local development and testing. Emails are logged to
    console and stored in memory for test assertions.

    Implements EmailPort protocol.
    """

    # In-memory storage for test assertions
    sent_emails: list[SentEmail] = field(default_factory=list)

    # Configuration
    log_level: int = logging.INFO
    log_body: bool = True  # Whether to log message content
    body_preview_length: int = 100  # Max chars of body to log

    # Simulated provider failure for testing; None sends normally
    _send_failure: str | None = None

    async def send_email(self, recipient: str, message: str) -> None:
        """
        Log an email instead of sending.

        Args:
            recipient: Email address of recipient
            message: Message body

        Raises:
            EmailValidationError: recipient is not an email address
            EmailSendError: a send failure was configured with set_send_failure
        """
        if "@" not in recipient:
            raise EmailValidationError(
                f"Invalid recipient address: {recipient!r}", field="recipient"
            )

        if self._send_failure is not None:
            logger.warning(f"EMAIL (dev): send to {recipient} failed: {self._send_failure}")
            raise EmailSendError(recipient, self._send_failure)

        message_id = f"dev-{uuid4().hex[:12]}"

        # Store for test assertions
        self.sent_emails.append(
            SentEmail(
                id=message_id,
                recipient=recipient,
                message=message,
                logged_at=datetime.now(UTC),
            )
        )

        self._log_email(recipient=recipient, message=message, message_id=message_id)

    def _log_email(self, recipient: str, message: str, message_id: str) -> None:
        """Log email details to console."""
        parts = [f"EMAIL (dev): To={recipient}"]

        if self.log_body and message:
            # Truncate body for logging
            preview = message[: self.body_preview_length]
            if len(message) > self.body_preview_length:
                preview += "..."
            parts.append(f"Body={preview}")

        parts.append(f"MessageID={message_id}")

        logger.log(self.log_level, ", ".join(parts))

    # --- Test Helper Methods ---

    def set_send_failure(self, error: str | None) -> None:
        """Make every send raise EmailSendError with `error` (None to reset)."""
        self._send_failure = error

    def get_last_email(self) -> SentEmail | None:
        """Get the most recently logged email."""
        return self.sent_emails[-1] if self.sent_emails else None

    def get_emails_to(self, recipient: str) -> list[SentEmail]:
        """Get all emails logged to a specific recipient."""
        return [e for e in self.sent_emails if e.recipient == recipient]

    def clear(self) -> None:
        """Clear all stored emails (for test isolation)."""
        self.sent_emails.clear()

    @property
    def email_count(self) -> int:
        """Get the number of logged emails."""
        return len(self.sent_emails)


# --- Factory Function ---


def create_dev_email_adapter(
    log_level: int = logging.INFO,
    log_body: bool = True,
    body_preview_length: int = 100,
) -> DevEmailAdapter:
    """
    Create a dev email adapter.

    Args:
        log_level: Logging level for email logs
        log_body: Whether to log message content
        body_preview_length: Max chars of body to preview

    Returns:
        Configured DevEmailAdapter
    """
    return DevEmailAdapter(
        log_level=log_level,
        log_body=log_body,
        body_preview_length=body_preview_length,
    )
