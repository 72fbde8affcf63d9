"""
타입 정의 모듈

Enum 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class OrderBookType(str, Enum):
    """호가창 조회 유형 (getorderbook의 type 파라미터)

    대소문자 구분 없이 생성 가능 (buy, SELL 등). 전송 값은 항상 Buy/Sell/Both.
    """

    BUY = "Buy"
    SELL = "Sell"
    BOTH = "Both"

    @classmethod
    def _missing_(cls, value: object) -> "OrderBookType | None":
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None

    def __str__(self) -> str:
        return self.value


class ExpectedShape(str, Enum):
    """엔드포인트별 응답 envelope의 result 형태

    엔드포인트 선언 시 한 번 고정되며 응답을 보고 추론하지 않음.
    """

    LEGACY_LIST = "LEGACY_LIST"          # result는 항상 배열 (단건 조회도 1개짜리 배열)
    OPTIONAL_SINGLE = "OPTIONAL_SINGLE"  # result는 객체 또는 null
    OPTIONAL_LIST = "OPTIONAL_LIST"      # result는 배열 또는 null

    @property
    def is_list(self) -> bool:
        """result가 배열 형태인지 여부"""
        return self is not ExpectedShape.OPTIONAL_SINGLE


class Cardinality(str, Enum):
    """호출자가 기대하는 결과 개수"""

    SINGLE = "SINGLE"  # 정확히 1건
    MANY = "MANY"      # 0건 이상 목록
    NONE = "NONE"      # 결과 무시 (성공 여부만 확인)


class BittrexErrorType(str, Enum):
    """에러 분류"""

    API_ERROR = "APIError"
    JSON_ERROR = "JsonError"
    NO_RESULTS = "NoResults"
