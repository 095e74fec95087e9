"""Email related domain models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SenderType(str, Enum):
    """Who the snapshot is from, which decides the template variant."""

    OWNER = "owner"
    MANAGER = "manager"

    @classmethod
    def resolve(cls, value: Optional[str]) -> "SenderType":
        """Map a raw ``senderType`` value to a variant.

        Only the exact string ``"owner"`` selects the personal variant; every
        other value, including a missing one, falls back to the team variant.
        """
        if value == cls.OWNER.value:
            return cls.OWNER
        return cls.MANAGER


@dataclass(frozen=True)
class EmailAttachment:
    """Binary attachment to be delivered with an email."""

    filename: str
    data: bytes
    content_type: str = "application/pdf"
    disposition: str = "attachment"


@dataclass(frozen=True)
class RenderedMessage:
    """Represents an email ready to be delivered."""

    subject: str
    html_body: str
    text_body: str
    attachment: EmailAttachment


@dataclass(frozen=True)
class SendResult:
    """Outcome of a single delivery attempt."""

    success: bool
    timestamp: str
    message: Optional[str] = None
    error: Optional[str] = None


__all__ = ["SenderType", "EmailAttachment", "RenderedMessage", "SendResult"]
