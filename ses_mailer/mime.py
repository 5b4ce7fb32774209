from __future__ import annotations

import base64
import binascii
import logging
import mimetypes
from email import policy
from email.message import EmailMessage

from .config import CHARSET, DEFAULT_ATTACHMENT_CONTENT_TYPE
from .exceptions import AttachmentDecodeError
from .models import Attachment, EmailRequest

logger = logging.getLogger(__name__)


def guess_content_type(filename: str) -> str:
    content_type, _ = mimetypes.guess_type(filename)
    if content_type is None:
        return DEFAULT_ATTACHMENT_CONTENT_TYPE
    # message/* and multipart/* parts cannot carry base64; send those as opaque bytes.
    if content_type.split("/", 1)[0] in {"message", "multipart"}:
        return DEFAULT_ATTACHMENT_CONTENT_TYPE
    return content_type


def decode_attachment(filename: str, payload_base64: str) -> Attachment:
    """
    Decode a base64 attachment payload.

    Line breaks and other whitespace are ignored, as in wrapped MIME bodies.
    Any other character outside the base64 alphabet, or bad padding, raises
    AttachmentDecodeError.
    """
    compact = "".join(payload_base64.split())
    try:
        content = base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise AttachmentDecodeError(f"Attachment {filename!r} is not valid base64: {exc}") from exc
    return Attachment(filename=filename, content=content, content_type=guess_content_type(filename))


def build_mime_message(request: EmailRequest) -> EmailMessage:
    """
    Build the MIME message for a single send.

    Without an attachment the result is a single text/html part. With one it
    becomes multipart/mixed: the HTML part first, then the attachment.
    """
    message = EmailMessage()
    message["From"] = request.sender
    message["To"] = ", ".join(request.recipients)
    message["Subject"] = request.subject
    message.set_content(request.html_body, subtype="html", charset=CHARSET)

    if request.has_attachment():
        attachment = decode_attachment(request.attachment_name, request.attachment_base64)
        maintype, subtype = attachment.content_type.split("/", 1)
        message.add_attachment(
            attachment.content,
            maintype=maintype,
            subtype=subtype,
            filename=attachment.filename,
        )
    elif request.attachment_name or request.attachment_base64:
        logger.debug(
            "Attachment skipped: name and payload must both be set (name=%r, payload=%s)",
            request.attachment_name,
            "set" if request.attachment_base64 else "empty",
        )
    return message


def to_raw_bytes(message: EmailMessage) -> bytes:
    return message.as_bytes(policy=policy.SMTP)
