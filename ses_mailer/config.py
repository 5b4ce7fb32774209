from __future__ import annotations

import os
from dataclasses import dataclass, field

from .models import Credentials

# --------------------------------
# 設定値

# SES の送信リージョン（環境変数で未指定の場合）
DEFAULT_AWS_REGION = "us-east-1"

# HTML 本文の文字コード
CHARSET = "utf-8"

# 拡張子から推測できない添付ファイルの Content-Type
DEFAULT_ATTACHMENT_CONTENT_TYPE = "application/octet-stream"
# --------------------------------


@dataclass
class Settings:
    aws_access_key_id: str
    aws_secret_access_key: str = field(repr=False)
    aws_region: str = DEFAULT_AWS_REGION
    aws_session_token: str | None = field(default=None, repr=False)
    from_email: str | None = None

    def credentials(self) -> Credentials:
        return Credentials(
            aws_access_key_id=self.aws_access_key_id,
            aws_secret_access_key=self.aws_secret_access_key,
            aws_session_token=self.aws_session_token,
        )

    @staticmethod
    def from_env(region_default: str = DEFAULT_AWS_REGION) -> "Settings":
        def require(name: str) -> str:
            value = os.getenv(name)
            if value is None or not value.strip():
                raise ValueError(f"Environment variable {name} is required.")
            return value.strip()

        def optional(name: str) -> str | None:
            value = os.getenv(name)
            if value is None or not value.strip():
                return None
            return value.strip()

        region = optional("AWS_REGION") or optional("AWS_DEFAULT_REGION") or region_default

        return Settings(
            aws_access_key_id=require("AWS_ACCESS_KEY_ID"),
            aws_secret_access_key=require("AWS_SECRET_ACCESS_KEY"),
            aws_region=region,
            aws_session_token=optional("AWS_SESSION_TOKEN"),
            from_email=optional("FROM_EMAIL"),
        )
