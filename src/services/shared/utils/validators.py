from decimal import Decimal, InvalidOperation


def to_decimal(v: object) -> Decimal:
    """任意の数値を Decimal に変換する

    int / float / 数値文字列を受け付ける。bool や数値でない値は ValueError。
    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する。
    """
    if isinstance(v, Decimal):
        return v
    if isinstance(v, bool) or not isinstance(v, (int, float, str)):
        raise ValueError(f"Not a number: {v!r}")
    try:
        return Decimal(str(v).strip())
    except InvalidOperation as e:
        raise ValueError(f"Not a number: {v!r}") from e
