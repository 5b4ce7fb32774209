from __future__ import annotations

from typing import Any, Callable, Dict, List

import pytest
from botocore.exceptions import ClientError

from ses_mailer.models import Credentials


class FakeSESClient:
    def __init__(self, response: Dict[str, Any] | None = None, error: Exception | None = None):
        self.calls: List[Dict[str, Any]] = []
        self.response = response or {
            "MessageId": "0100018c-fake-message-id",
            "ResponseMetadata": {"HTTPStatusCode": 200},
        }
        self._error = error

    def send_raw_email(self, **kwargs: Any) -> Dict[str, Any]:
        self.calls.append(kwargs)
        if self._error is not None:
            raise self._error
        return self.response


@pytest.fixture
def make_fake_ses() -> Callable[..., FakeSESClient]:
    return FakeSESClient


@pytest.fixture
def fake_ses() -> FakeSESClient:
    return FakeSESClient()


@pytest.fixture
def rejected_error() -> ClientError:
    return ClientError(
        {"Error": {"Code": "MessageRejected", "Message": "Email address is not verified."}},
        "SendRawEmail",
    )


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(aws_access_key_id="AKIAEXAMPLE", aws_secret_access_key="secret")
