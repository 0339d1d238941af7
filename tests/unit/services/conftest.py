from datetime import datetime, timezone
from unittest.mock import MagicMock
from zoneinfo import ZoneInfo

import pytest

from services.shared.config import AppConfig

IST = ZoneInfo("Asia/Kolkata")
# 2026-10-19 12:00 IST
NOW = datetime(2026, 10, 19, 6, 30, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def aws_environment(monkeypatch):
    """boto3 クライアント生成用のダミー環境変数（実際の AWS には接続しない）"""
    monkeypatch.setenv("AWS_DEFAULT_REGION", "ap-south-1")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("TABLE_NAME", "test-table")
    monkeypatch.setenv("POWERTOOLS_SERVICE_NAME", "travel-booking-test")


@pytest.fixture
def now():
    """全テスト共通の現在時刻フィクスチャ"""
    return NOW


@pytest.fixture
def clock(now):
    return lambda: now


@pytest.fixture
def tz():
    return IST


@pytest.fixture
def config():
    return AppConfig(
        table_name="test-table",
        client_url="https://tours.example.com",
        email_sender="noreply@example.com",
        team_email="team@example.com",
    )


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()
