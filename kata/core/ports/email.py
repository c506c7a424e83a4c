"""
Email Adapter Interface.

Protocol-based interface for sending short transactional emails
(one-time login codes).

Implementation strategies:
1. DevEmailAdapter: Logs emails to console (dev/test)
2. SMTPEmailAdapter: Sends via SMTP (future)

All strategies implement the same EmailPort interface.
"""

from __future__ import annotations

from typing import Protocol


class EmailPort(Protocol):
    """
    Email sending interface.

    Implementations:
    - DevEmailAdapter: Logs to console (dev/test)
    """

    async def send_email(self, recipient: str, message: str) -> None:
        """
        Send a plain text message.

        Args:
            recipient: Email address of recipient
            message: Message body

        Raises:
            EmailValidationError: Recipient address is malformed
            EmailSendError: Provider refused or failed the send
        """
        ...


# --- Error Types ---


class EmailError(Exception):
    """Base exception for email-related errors."""

    pass


class EmailValidationError(EmailError):
    """Invalid email address or message format."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class EmailSendError(EmailError):
    """Failed to send email."""

    def __init__(self, recipient: str, error: str) -> None:
        self.recipient = recipient
        self.error = error
        super().__init__(f"Failed to send email to {recipient}: {error}")
