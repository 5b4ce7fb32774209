"""Send HTML email with an optional attachment through Amazon SES raw send."""

from .dispatcher import MailDispatcher
from .exceptions import AttachmentDecodeError, MailError
from .models import Attachment, Credentials, EmailRequest

__all__ = [
    "Attachment",
    "AttachmentDecodeError",
    "Credentials",
    "EmailRequest",
    "MailDispatcher",
    "MailError",
]
