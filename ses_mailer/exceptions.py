from __future__ import annotations


class MailError(Exception):
    """Raised when an email cannot be built or handed to SES."""


class AttachmentDecodeError(MailError, ValueError):
    """Raised when the attachment payload is not valid base64."""
