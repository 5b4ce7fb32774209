from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Credentials:
    aws_access_key_id: str
    aws_secret_access_key: str = field(repr=False)
    aws_session_token: Optional[str] = field(default=None, repr=False)


@dataclass(frozen=True)
class Attachment:
    filename: str
    content: bytes
    content_type: str


@dataclass(frozen=True)
class EmailRequest:
    sender: str
    recipients: List[str]
    subject: str
    html_body: str
    attachment_name: Optional[str] = None
    attachment_base64: Optional[str] = None  # standard alphabet, padding required

    def has_attachment(self) -> bool:
        """Both attachment fields must be non-empty; a lone name or payload is ignored."""
        return bool(self.attachment_name) and bool(self.attachment_base64)
