from __future__ import annotations

import logging
from email.message import EmailMessage
from typing import Any, Iterable, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .config import DEFAULT_AWS_REGION, Settings
from .exceptions import MailError
from .mime import build_mime_message, to_raw_bytes
from .models import Credentials, EmailRequest

logger = logging.getLogger(__name__)


class MailDispatcher:
    """Send HTML email with an optional attachment through SES raw send.

    Credentials are fixed at construction and not checked until the first
    send. Provider errors (auth, throttling, rejected addresses, size limits)
    propagate as botocore exceptions; nothing is retried.
    """

    provider = "ses"

    def __init__(
        self,
        credentials: Credentials,
        *,
        region: str = DEFAULT_AWS_REGION,
        client: Any | None = None,
    ) -> None:
        self._region = region
        if client is None:
            client_kwargs = {
                "region_name": region,
                "aws_access_key_id": credentials.aws_access_key_id,
                "aws_secret_access_key": credentials.aws_secret_access_key,
            }
            if credentials.aws_session_token:
                client_kwargs["aws_session_token"] = credentials.aws_session_token
            client = boto3.client("ses", **client_kwargs)
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings, client: Any | None = None) -> "MailDispatcher":
        return cls(settings.credentials(), region=settings.aws_region, client=client)

    @property
    def region(self) -> str:
        return self._region

    def build_message(
        self,
        sender: str,
        recipients: Iterable[str],
        subject: str,
        html_body: str,
        attachment_name: Optional[str] = None,
        attachment_base64: Optional[str] = None,
    ) -> EmailMessage:
        if not sender:
            raise MailError("Sender address is required.")
        request = EmailRequest(
            sender=sender,
            recipients=_recipient_list(recipients),
            subject=subject,
            html_body=html_body,
            attachment_name=attachment_name,
            attachment_base64=attachment_base64,
        )
        return build_mime_message(request)

    def send_email(
        self,
        sender: str,
        recipients: Iterable[str],
        subject: str,
        html_body: str,
        attachment_name: Optional[str] = None,
        attachment_base64: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Build the message and submit it with SendRawEmail.

        Returns the SES response as-is (``MessageId`` plus response metadata).
        Raises MailError for a missing sender or recipients and
        AttachmentDecodeError for a malformed payload, both before any
        network call.
        """
        destinations = _recipient_list(recipients)
        message = self.build_message(
            sender,
            destinations,
            subject,
            html_body,
            attachment_name=attachment_name,
            attachment_base64=attachment_base64,
        )
        raw = to_raw_bytes(message)
        logger.info(
            "Sending raw email via SES region=%s recipients=%s attachment=%s bytes=%s",
            self._region,
            len(destinations),
            message.is_multipart(),
            len(raw),
        )
        try:
            response = self._client.send_raw_email(
                Source=sender,
                Destinations=destinations,
                RawMessage={"Data": raw},
            )
        except ClientError as exc:
            error = exc.response.get("Error", {})
            logger.error(
                "SES rejected the message (code=%s): %s",
                error.get("Code", ""),
                error.get("Message", exc),
            )
            raise
        except BotoCoreError as exc:
            logger.error("SES request failed: %s", exc)
            raise
        logger.info("Mail sent with message id %s", response.get("MessageId"))
        return response


def _recipient_list(recipients: Iterable[str]) -> List[str]:
    if isinstance(recipients, str):
        raise MailError("Recipients must be a list of addresses, not a single string.")
    addresses = list(recipients)
    if not addresses:
        raise MailError("At least one recipient is required.")
    return addresses
