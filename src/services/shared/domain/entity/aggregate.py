from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Generic, TypeVar

ID = TypeVar("ID")


@dataclass(frozen=True)
class DomainEvent:
    """集約の状態変化を表すイベント

    通知などの副作用は永続化が成功した後にアプリケーション層が起動する。
    """

    occurred_at: datetime

    @property
    def name(self) -> str:
        return type(self).__name__


class Entity(Generic[ID]):
    """同一性を ID のみで判定するオブジェクト"""

    def __init__(self, id: ID) -> None:
        self._id = id

    @property
    def id(self) -> ID:
        return self._id

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return False
        return self._id == other._id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!s})"


class AggregateRoot(Entity[ID]):
    """集約ルート

    1予約 = 1アイテムで、書き込みの単位もこの境界に一致する。
    発生したイベントは flush_domain_events() で明示的に取り出す。
    """

    def __init__(self, id: ID) -> None:
        super().__init__(id)
        self._domain_events: list[DomainEvent] = []

    @property
    def pending_events(self) -> tuple[DomainEvent, ...]:
        return tuple(self._domain_events)

    def add_domain_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def flush_domain_events(self) -> list[DomainEvent]:
        """未処理のイベントを取り出し、集約側からは消す"""
        events, self._domain_events = self._domain_events, []
        return events
