"""
숫자 변환 유틸리티

모든 금액/수량은 Decimal로 다루고, 쿼리 파라미터로 보낼 때는
지수 표기 없는 10진 문자열로 변환.
"""

from decimal import Decimal, InvalidOperation
from typing import Any


def to_decimal(value: Any) -> Decimal:
    """API 응답 숫자 -> Decimal

    float는 str()을 거쳐 변환하여 이진 부동소수점 오차를 가져오지 않음.

    Raises:
        ValueError: 숫자로 해석할 수 없는 경우
    """
    if isinstance(value, bool):
        raise ValueError(f"숫자가 아닙니다: {value!r}")
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"숫자가 아닙니다: {value!r}") from e


def to_optional_decimal(value: Any) -> Decimal | None:
    """null 허용 숫자 필드 변환"""
    if value is None:
        return None
    return to_decimal(value)


def format_decimal(value: Decimal | float | int | str) -> str:
    """쿼리 파라미터용 10진 문자열

    Example:
        >>> format_decimal(1e-08)
        '0.00000001'
        >>> format_decimal(Decimal("1.2"))
        '1.2'

    Raises:
        ValueError: 유한한 숫자가 아닌 경우
    """
    number = to_decimal(value)
    if not number.is_finite():
        raise ValueError(f"유한한 숫자가 아닙니다: {value!r}")
    return format(number, "f")
