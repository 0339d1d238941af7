from __future__ import annotations

import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class AppConfig:
    """アプリケーション設定

    Lambda のコールドスタート時に環境変数から一度だけ生成し、
    各サービスのコンストラクタに注入する（プロセス全体のグローバル参照はしない）。
    """

    table_name: str = ""
    client_url: str = "http://localhost:3000"
    timezone_name: str = "Asia/Kolkata"
    reference_max_attempts: int = 5
    max_advance_days: int | None = None
    strict_status_transitions: bool = False
    notify_function_name: str = ""
    email_sender: str = ""
    team_email: str = ""
    reminder_days_ahead: int = 7

    def __post_init__(self) -> None:
        if self.reference_max_attempts < 1:
            raise ValueError("reference_max_attempts must be at least 1")
        if self.max_advance_days is not None and self.max_advance_days < 0:
            raise ValueError("max_advance_days cannot be negative")
        if self.reminder_days_ahead < 1:
            raise ValueError("reminder_days_ahead must be at least 1")
        # 不正なタイムゾーン名はここで検出する
        ZoneInfo(self.timezone_name)

    @property
    def timezone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone_name)

    @property
    def notifier_configured(self) -> bool:
        return bool(self.email_sender)

    def payment_url(self, reference: object) -> str:
        """決済ページの URL"""
        return f"{self.client_url.rstrip('/')}/payment/{reference}"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> AppConfig:
        """環境変数から設定を生成する"""
        env = os.environ if environ is None else environ
        max_advance = env.get("MAX_ADVANCE_DAYS", "").strip()
        sender = env.get("EMAIL_SENDER", "")
        return cls(
            table_name=env.get("TABLE_NAME", ""),
            client_url=env.get("CLIENT_URL", cls.client_url),
            timezone_name=env.get("BOOKING_TIMEZONE", cls.timezone_name),
            reference_max_attempts=int(
                env.get("REFERENCE_MAX_ATTEMPTS", cls.reference_max_attempts)
            ),
            max_advance_days=int(max_advance) if max_advance else None,
            strict_status_transitions=(
                env.get("STRICT_STATUS_TRANSITIONS", "").strip().lower() in _TRUTHY
            ),
            notify_function_name=env.get("NOTIFY_FUNCTION_NAME", ""),
            email_sender=sender,
            team_email=env.get("TEAM_EMAIL", "") or sender,
            reminder_days_ahead=int(
                env.get("REMINDER_DAYS_AHEAD", cls.reminder_days_ahead)
            ),
        )
