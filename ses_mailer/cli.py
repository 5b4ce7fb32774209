from __future__ import annotations

import argparse
import base64
import logging
import sys
from pathlib import Path
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from .config import Settings
from .dispatcher import MailDispatcher
from .exceptions import MailError

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Send an HTML email through Amazon SES.")
    parser.add_argument(
        "--from",
        dest="sender",
        default=None,
        help="sender address (defaults to FROM_EMAIL)",
    )
    parser.add_argument(
        "--to",
        dest="recipients",
        action="append",
        required=True,
        help="recipient address; repeat for several recipients",
    )
    parser.add_argument("--subject", default="")
    body = parser.add_mutually_exclusive_group(required=True)
    body.add_argument("--html", default=None, help="HTML body as a string")
    body.add_argument("--html-file", default=None, help="path to an HTML file used as the body")
    parser.add_argument("--attachment", default=None, help="path to a file to attach")
    parser.add_argument(
        "--attachment-name",
        default=None,
        help="filename shown to recipients (defaults to the attachment's basename)",
    )
    return parser


def main(argv: list[str] | None = None, *, client: Any | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s"
    )

    try:
        settings = Settings.from_env()
    except ValueError as exc:
        logger.error("Missing configuration: %s", exc)
        return 1

    sender = args.sender or settings.from_email
    if not sender:
        logger.error("Missing configuration: pass --from or set FROM_EMAIL.")
        return 1

    try:
        html_body = (
            Path(args.html_file).read_text(encoding="utf-8") if args.html_file else args.html
        )
        attachment_name = None
        attachment_base64 = None
        if args.attachment:
            path = Path(args.attachment)
            attachment_name = args.attachment_name or path.name
            attachment_base64 = base64.b64encode(path.read_bytes()).decode("ascii")
    except OSError as exc:
        logger.error("Could not read input file: %s", exc)
        return 1

    dispatcher = MailDispatcher.from_settings(settings, client=client)
    try:
        response = dispatcher.send_email(
            sender,
            args.recipients,
            args.subject,
            html_body,
            attachment_name=attachment_name,
            attachment_base64=attachment_base64,
        )
    except MailError as exc:
        logger.error("Invalid email: %s", exc)
        return 1
    except (ClientError, BotoCoreError) as exc:
        logger.exception("Mail sending failed: %s", exc)
        return 1

    logger.info("Done. MessageId=%s", response.get("MessageId"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
