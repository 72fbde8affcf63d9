"""
유틸리티 패키지

타임존 처리, 숫자 포맷 등 공통 유틸리티
"""

from bittrex_api.core.utils.timezone import (
    now_utc,
    parse_api_timestamp,
    parse_optional_timestamp,
)
from bittrex_api.core.utils.numbers import (
    format_decimal,
    to_decimal,
    to_optional_decimal,
)

__all__ = [
    "now_utc",
    "parse_api_timestamp",
    "parse_optional_timestamp",
    "format_decimal",
    "to_decimal",
    "to_optional_decimal",
]
