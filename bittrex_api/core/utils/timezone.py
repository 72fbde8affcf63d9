"""
타임존 유틸리티

Bittrex 응답의 시각 문자열은 타임존 표기가 없는 UTC 기준.
내부 표현은 항상 tzinfo=timezone.utc인 datetime.
"""

import re
from datetime import datetime, timezone

# 2014-07-09T07:19:30.15 처럼 소수점 이하 자릿수가 일정하지 않음
_FRACTION_RE = re.compile(r"\.(\d+)")


def now_utc() -> datetime:
    """현재 UTC 시간 반환 (타임존 명시)"""
    return datetime.now(timezone.utc)


def parse_api_timestamp(value: str) -> datetime:
    """Bittrex 시각 문자열을 UTC datetime으로 변환

    소수점 이하 자릿수를 마이크로초(6자리)에 맞춰 정규화한 뒤 파싱.

    Args:
        value: ISO 8601 형식 문자열 (예: "2014-07-09T07:19:30.15")

    Returns:
        UTC datetime

    Raises:
        ValueError: 형식이 잘못된 경우

    Example:
        >>> parse_api_timestamp("2014-02-13T00:00:00")
        datetime.datetime(2014, 2, 13, 0, 0, tzinfo=datetime.timezone.utc)
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1]

    text = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)

    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_optional_timestamp(value: str | None) -> datetime | None:
    """null 허용 시각 필드 변환"""
    if not value:
        return None
    return parse_api_timestamp(value)
