from dataclasses import dataclass


@dataclass(frozen=True)
class BookingMetadata:
    """受付情報（参考情報のため検証しない）"""

    source: str = "website"
    ip_address: str | None = None
    user_agent: str | None = None
