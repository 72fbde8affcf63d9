"""
core/utils/timezone.py 테스트
"""

from datetime import datetime, timezone

import pytest

from bittrex_api.core.utils.timezone import (
    now_utc,
    parse_api_timestamp,
    parse_optional_timestamp,
)


class TestNowUtc:
    """now_utc 테스트"""

    def test_is_aware_utc(self) -> None:
        """UTC 타임존 명시"""
        assert now_utc().tzinfo == timezone.utc


class TestParseApiTimestamp:
    """parse_api_timestamp 테스트"""

    def test_without_fraction(self) -> None:
        """소수점 없음"""
        dt = parse_api_timestamp("2014-02-13T00:00:00")

        assert dt == datetime(2014, 2, 13, tzinfo=timezone.utc)

    def test_two_digit_fraction(self) -> None:
        """소수점 2자리 (10ms 단위)"""
        dt = parse_api_timestamp("2014-07-09T07:19:30.15")

        assert dt.microsecond == 150000
        assert dt.tzinfo == timezone.utc

    def test_three_digit_fraction(self) -> None:
        """소수점 3자리"""
        dt = parse_api_timestamp("2014-05-30T07:57:49.637")

        assert dt.microsecond == 637000

    def test_long_fraction_truncated(self) -> None:
        """7자리 이상은 마이크로초로 절삭"""
        dt = parse_api_timestamp("2017-12-01T10:00:00.1234567")

        assert dt.microsecond == 123456

    def test_trailing_z(self) -> None:
        """Z 접미사"""
        dt = parse_api_timestamp("2014-02-13T00:00:00Z")

        assert dt == datetime(2014, 2, 13, tzinfo=timezone.utc)

    def test_invalid(self) -> None:
        """형식 오류"""
        with pytest.raises(ValueError):
            parse_api_timestamp("yesterday")


class TestParseOptionalTimestamp:
    """parse_optional_timestamp 테스트"""

    def test_none(self) -> None:
        """null은 None"""
        assert parse_optional_timestamp(None) is None

    def test_value(self) -> None:
        """값이 있으면 변환"""
        dt = parse_optional_timestamp("2014-07-09T03:55:48.77")

        assert dt is not None
        assert dt.year == 2014
