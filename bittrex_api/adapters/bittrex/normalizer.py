"""
Bittrex 응답 정규화

success/message/result envelope를 엔드포인트별로 선언된 형태(ExpectedShape)와
기대 개수(Cardinality)에 따라 값, 목록, 또는 분류된 에러로 변환.

단건 응답은 엔드포인트 버전에 따라 두 가지로 내려옴:
- 객체 또는 null (OPTIONAL_SINGLE): null이면 NoResultsError
- 1개짜리 배열 (LEGACY_LIST / OPTIONAL_LIST): 0개면 NoResultsError, 2개 이상이면 BittrexApiError
두 방식은 엔드포인트별로 유지하며 하나로 합치지 않음.
"""

from collections.abc import Callable
from typing import Any

from bittrex_api.adapters.bittrex.errors import (
    BittrexApiError,
    BittrexJsonError,
    NoResultsError,
)
from bittrex_api.adapters.bittrex.models import ResponseEnvelope
from bittrex_api.core.constants import Messages
from bittrex_api.core.types import Cardinality, ExpectedShape

# dict -> 레코드 변환 함수 (보통 Model.from_api)
RecordParser = Callable[[Any], Any]


def decode_envelope(data: Any) -> ResponseEnvelope:
    """JSON 디코딩 결과 -> ResponseEnvelope

    Raises:
        BittrexJsonError: envelope 형식이 아닌 경우
    """
    try:
        return ResponseEnvelope.from_api(data)
    except ValueError as e:
        raise BittrexJsonError(str(e)) from e


def parse_record(item: Any, parser: RecordParser | None) -> Any:
    """result 항목 하나를 레코드로 변환

    parser가 None이면 원본 그대로 반환.

    Raises:
        BittrexJsonError: 필수 필드 누락 또는 값 형식 오류
    """
    if parser is None:
        return item

    if not isinstance(item, dict):
        raise BittrexJsonError(f"result 항목이 JSON 객체가 아닙니다: {type(item).__name__}")

    try:
        return parser(item)
    except KeyError as e:
        raise BittrexJsonError(f"필수 필드 누락: {e}") from e
    except (TypeError, ValueError, AttributeError) as e:
        raise BittrexJsonError(f"필드 값 형식 오류: {e}") from e


def check_list_response(result: list[Any] | None) -> list[Any]:
    """목록 응답 -> 목록 (없으면 빈 목록)"""
    return list(result) if result is not None else []


def check_single_response(result: Any | None) -> Any:
    """객체 또는 null 응답 -> 단건

    Raises:
        NoResultsError: result가 없는 경우
    """
    if result is None:
        raise NoResultsError(Messages.NO_RESULTS)
    return result


def check_single_list_response(result: list[Any] | None) -> Any:
    """배열 응답 -> 정확히 1건

    Raises:
        NoResultsError: 0건
        BittrexApiError: 2건 이상 (알 수 없는 필터가 무시된 모호한 조회)
    """
    items = check_list_response(result)

    if len(items) == 1:
        return items[0]
    if not items:
        raise NoResultsError(Messages.NO_RESULTS)
    raise BittrexApiError(Messages.MULTIPLE_RESULTS)


def normalize(
    envelope: ResponseEnvelope,
    shape: ExpectedShape,
    cardinality: Cardinality,
    parser: RecordParser | None = None,
) -> Any:
    """envelope -> 성공 값 또는 에러

    Args:
        envelope: 디코딩된 응답 envelope
        shape: 엔드포인트에 선언된 result 형태
        cardinality: 기대 개수
        parser: 레코드 변환 함수 (None이면 원본 유지)

    Returns:
        SINGLE: 레코드 1건, MANY: 레코드 목록, NONE: None

    Raises:
        BittrexApiError: success=false 또는 2건 이상
        NoResultsError: 단건을 기대했지만 결과 없음
        BittrexJsonError: result 형태가 선언과 다름
    """
    if not envelope.success:
        # message는 거래소 응답 그대로 전달
        raise BittrexApiError(envelope.message)

    if cardinality is Cardinality.NONE:
        return None

    result = envelope.result

    if shape.is_list:
        if result is not None and not isinstance(result, list):
            raise BittrexJsonError(
                f"result가 배열이 아닙니다 ({shape.value}): {type(result).__name__}"
            )

        if cardinality is Cardinality.MANY:
            return [parse_record(item, parser) for item in check_list_response(result)]

        return parse_record(check_single_list_response(result), parser)

    # OPTIONAL_SINGLE
    if cardinality is Cardinality.MANY:
        raise ValueError(f"{shape.value} 형태는 {cardinality.value} 개수와 함께 쓸 수 없습니다")

    if isinstance(result, list):
        raise BittrexJsonError(f"result가 단일 객체가 아닙니다 ({shape.value}): list")

    return parse_record(check_single_response(result), parser)


def normalize_response(
    data: Any,
    shape: ExpectedShape,
    cardinality: Cardinality,
    parser: RecordParser | None = None,
) -> Any:
    """JSON 디코딩 결과 -> 성공 값 또는 에러 (decode_envelope + normalize)"""
    envelope = decode_envelope(data)
    return normalize(envelope, shape, cardinality, parser)
