import random
from datetime import datetime, tzinfo

from services.booking.domain.value_object import BookingReference


class BookingReferenceGenerator:
    """予約番号の生成

    形式: WW-{YYYYMMDD}-{1000〜9999 の乱数}
    一意性は永続化層の一意制約で担保し、衝突時は呼び出し側が再生成して再試行する。
    """

    SUFFIX_MIN = 1000
    SUFFIX_MAX = 9999

    def __init__(self, tz: tzinfo, rng: random.Random | None = None) -> None:
        self._tz = tz
        self._rng = rng or random.SystemRandom()

    def generate(self, now: datetime) -> BookingReference:
        """予約番号を1つ生成する"""
        local_date = now.astimezone(self._tz) if now.tzinfo else now
        suffix = self._rng.randint(self.SUFFIX_MIN, self.SUFFIX_MAX)
        return BookingReference(
            f"{BookingReference.PREFIX}-{local_date:%Y%m%d}-{suffix}"
        )
