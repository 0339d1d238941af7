import importlib
import json
from dataclasses import dataclass

import pytest


@dataclass
class FakeLambdaContext:
    function_name: str = "test-function"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-south-1:123456789012:function:test-function"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def load_handler():
    """ハンドラーモジュールを読み込む（環境変数の設定後に import する）"""

    def _load(name: str):
        return importlib.import_module(f"services.booking.handlers.{name}")

    return _load


@pytest.fixture
def api_event():
    """API Gateway (REST) プロキシ統合イベントを生成する Factory fixture"""

    def _factory(
        body: dict | str | None = None,
        path_parameters: dict | None = None,
        query: dict | None = None,
        method: str = "GET",
        path: str = "/bookings",
    ) -> dict:
        if isinstance(body, dict):
            body = json.dumps(body)
        return {
            "resource": path,
            "path": path,
            "httpMethod": method,
            "headers": {"Content-Type": "application/json"},
            "queryStringParameters": query,
            "pathParameters": path_parameters,
            "body": body,
            "isBase64Encoded": False,
            "requestContext": {
                "requestId": "req-1",
                "stage": "prod",
                "identity": {
                    "sourceIp": "203.0.113.5",
                    "userAgent": "pytest",
                },
            },
        }

    return _factory
