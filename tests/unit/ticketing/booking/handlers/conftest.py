import json
import os
from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest

# api モジュールは import 時に boto3 のクライアントを生成するため、先に設定しておく
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "SessionTable")
os.environ.setdefault("CONFIRMATION_MODE", "log")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "ticket-machine-service")

from ticketing.booking.applications import TicketMachineService  # noqa: E402
from ticketing.booking.handlers import api  # noqa: E402
from ticketing.booking.infrastructure import InMemoryDraftRepository  # noqa: E402


@dataclass
class FakeLambdaContext:
    function_name: str = "TicketMachineLambda"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:TicketMachineLambda"
    )
    aws_request_id: str = "52fdfc07-2182-454f-963f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def confirmation():
    return MagicMock()


@pytest.fixture
def repository():
    return InMemoryDraftRepository()


@pytest.fixture(autouse=True)
def service(monkeypatch, repository, confirmation):
    """api モジュールのサービスをインメモリ実装に差し替える"""
    service = TicketMachineService(repository=repository, confirmation=confirmation)
    monkeypatch.setattr(api, "service", service)
    return service


@pytest.fixture
def create_event():
    """API Gateway REST プロキシイベントを生成する Factory fixture"""

    def _factory(
        method: str,
        path: str,
        body=None,
        session_id: str | None = "session-123",
        session_header: str = "x-session-id",
    ) -> dict:
        headers = {"Content-Type": "application/json"}
        if session_id is not None:
            headers[session_header] = session_id
        return {
            "resource": path,
            "path": path,
            "httpMethod": method,
            "headers": headers,
            "multiValueHeaders": {k: [v] for k, v in headers.items()},
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "pathParameters": None,
            "stageVariables": None,
            "requestContext": {
                "requestId": "c6af9ac6-7b61-11e6-9a41-93e8deadbeef",
                "resourcePath": path,
                "httpMethod": method,
                "path": f"/prod{path}",
                "stage": "prod",
            },
            "body": None if body is None else json.dumps(body),
            "isBase64Encoded": False,
        }

    return _factory


@pytest.fixture
def call_api(create_event, lambda_context):
    """ハンドラーを呼び出し、(ステータス, 本文, セッションID) を返す"""

    def _call(method: str, path: str, body=None, **kwargs):
        event = create_event(method, path, body, **kwargs)
        response = api.lambda_handler(event, lambda_context)
        return (
            response["statusCode"],
            json.loads(response["body"]),
            _header(response, "x-session-id"),
        )

    return _call


def _header(response: dict, name: str) -> str | None:
    values = response.get("multiValueHeaders") or {}
    if name in values:
        return values[name][0]
    return (response.get("headers") or {}).get(name)
