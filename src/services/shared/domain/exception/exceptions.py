from __future__ import annotations

from dataclasses import dataclass


class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（ステータスが期待値と異なる場合）"""

    pass


@dataclass(frozen=True)
class Violation:
    """入力値の違反1件（フィールド名 + メッセージ）"""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class ValidationFailedException(DomainException):
    """入力値検証エラー

    検出したすべての違反を保持する（最初の1件で打ち切らない）。
    """

    def __init__(self, violations: list[Violation]) -> None:
        if not violations:
            raise ValueError("ValidationFailedException requires at least one violation")
        self.violations = list(violations)
        super().__init__(
            "Validation failed: " + "; ".join(v.message for v in self.violations)
        )


class CancellationNotAllowedException(BusinessRuleViolationException):
    """キャンセル不可（出発24時間以内、またはキャンセル・返金済み）"""

    pass


class ReferenceCollisionExhaustedException(DomainException):
    """予約番号の重複が再試行上限まで解消しなかった場合"""

    pass


class PersistenceFailureException(DomainException):
    """永続化層が利用できない場合（このコアでは再試行しない）"""

    pass


class NotificationFailureException(DomainException):
    """通知送信の失敗（ログ出力のみで親処理は失敗させない）"""

    pass
