from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo


@dataclass(frozen=True)
class IsoDateTime:
    """日時(ISO 8601形式、タイムゾーン付き)

    タイムゾーンを持たない値は生成時に指定タイムゾーン（既定 UTC）とみなす。
    """

    value: datetime

    def __post_init__(self) -> None:
        if self.value.tzinfo is None:
            object.__setattr__(self, "value", self.value.replace(tzinfo=timezone.utc))

    @classmethod
    def from_string(cls, s: str, default_tz: tzinfo = timezone.utc) -> IsoDateTime:
        """ISO 8601 形式の文字列から生成

        日付のみ（YYYY-MM-DD）の場合は default_tz の 0 時とする。
        """
        try:
            dt = datetime.fromisoformat(s.strip().replace("Z", "+00:00"))
        except (ValueError, AttributeError) as e:
            raise ValueError(f"Invalid ISO 8601 datetime: {s}") from e
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=default_tz)
        return cls(value=dt)

    @classmethod
    def start_of_day(cls, day: date, tz: tzinfo) -> IsoDateTime:
        """指定日の 0 時（tz 基準）"""
        return cls(value=datetime.combine(day, time.min, tzinfo=tz))

    def __str__(self) -> str:
        return self.value.isoformat()

    def local_date(self, tz: tzinfo) -> date:
        """tz におけるカレンダー日付"""
        return self.value.astimezone(tz).date()

    def until(self, other: datetime) -> timedelta:
        """other からこの日時までの残り時間（過去なら負）"""
        return self.value - other
