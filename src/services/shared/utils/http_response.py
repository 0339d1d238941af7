import json

from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from services.shared.domain.exception import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    OptimisticLockException,
    ReferenceCollisionExhaustedException,
    ResourceNotFoundException,
    ValidationFailedException,
    Violation,
)


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway Lambda Proxy Integration のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def parse_json_body(body: str | None) -> dict:
    """リクエストボディを JSON オブジェクトとして読む（空なら空の dict）"""
    if not body:
        return {}
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise ValidationFailedException(
            [Violation("body", "Request body must be valid JSON")]
        ) from e
    if not isinstance(data, dict):
        raise ValidationFailedException(
            [Violation("body", "Request body must be a JSON object")]
        )
    return data


def _violations_body(violations: list[Violation]) -> dict:
    return {
        "message": "Validation failed",
        "errors": [
            {**v.to_dict(), "field": to_camel(v.field)} for v in violations
        ],
    }


def validation_error_response(error: ValidationError) -> dict:
    """pydantic の検証エラーを 400 レスポンスに変換する"""
    violations = [
        Violation(
            ".".join(str(part) for part in e["loc"]) or "body",
            e["msg"],
        )
        for e in error.errors()
    ]
    return api_response(400, _violations_body(violations))


def error_response(error: DomainException) -> dict:
    """ドメイン例外を HTTP レスポンスに変換する"""
    if isinstance(error, ValidationFailedException):
        return api_response(400, _violations_body(error.violations))
    if isinstance(error, ResourceNotFoundException):
        return api_response(404, {"message": str(error)})
    if isinstance(
        error,
        (
            ReferenceCollisionExhaustedException,
            DuplicateResourceException,
            OptimisticLockException,
        ),
    ):
        return api_response(409, {"message": str(error)})
    if isinstance(error, BusinessRuleViolationException):
        return api_response(
            400, {"message": str(error), "error": type(error).__name__}
        )
    return api_response(500, {"message": "Internal server error"})
