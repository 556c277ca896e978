import os
from dataclasses import dataclass
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

# Handler モジュールは import 時に boto3 のリソースを生成する
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "test-table")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "test-service")

from services.shared.domain import ShowTimeId  # noqa: E402


@dataclass
class FixedClock:
    """常に同じ時刻を返す Clock"""

    value: datetime

    def now(self) -> datetime:
        return self.value


@dataclass
class FakeLambdaContext:
    function_name: str = "test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:ap-northeast-1:123456789012:function:test"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def show_time_id():
    """全テスト共通の ShowTimeId フィクスチャ"""
    return ShowTimeId(value="show-123")


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def fixed_clock():
    return FixedClock(datetime(2024, 1, 8, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def make_http_event():
    """API Gateway HTTP API (payload 2.0) のイベントを生成する"""

    def _factory(
        path_parameters: dict | None = None,
        body: str | None = None,
        query: dict | None = None,
    ) -> dict:
        return {
            "version": "2.0",
            "routeKey": "$default",
            "rawPath": "/",
            "rawQueryString": "",
            "headers": {"content-type": "application/json"},
            "queryStringParameters": query,
            "pathParameters": path_parameters,
            "requestContext": {
                "http": {"method": "GET", "path": "/"},
                "requestId": "test-request",
                "stage": "$default",
            },
            "body": body,
            "isBase64Encoded": False,
        }

    return _factory
