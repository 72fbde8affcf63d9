"""
Bittrex 에러 분류

세 가지 종류로만 구분:
- BittrexApiError: 요청 거부 또는 전송 계층 실패 (연결, TLS, 타임아웃, 리다이렉트 루프)
- BittrexJsonError: 응답 본문이 기대한 스키마와 다름
- NoResultsError: 성공 응답이지만 1건을 기대한 곳에 0건

메시지에는 API 키/시크릿/서명된 URL을 절대 포함하지 않음.
"""

from bittrex_api.core.types import BittrexErrorType


class BittrexError(Exception):
    """Bittrex 에러 공통 베이스

    Attributes:
        error_type: 에러 분류
        message: 사람이 읽을 수 있는 상세 메시지 (API 응답 message 그대로)
    """

    error_type: BittrexErrorType = BittrexErrorType.API_ERROR
    description: str = "Error while calling Bittrex API"

    def __init__(self, message: str):
        self.message = message
        super().__init__(self._format(message))

    def _format(self, message: str) -> str:
        return f"{self.description}: {message}"


class BittrexApiError(BittrexError):
    """Bittrex API 에러

    success=false 응답 또는 HTTP 전송 실패 시 발생.
    거래소 측 실패 사유(파라미터 오류, 잔고 부족 등)는 재시도로 해결되지 않으므로
    항상 호출자에게 전달.
    """

    error_type = BittrexErrorType.API_ERROR
    description = "Error while calling Bittrex API"


class BittrexJsonError(BittrexError):
    """응답 파싱 에러

    JSON이 아니거나 envelope/레코드 스키마가 맞지 않을 때 발생.
    """

    error_type = BittrexErrorType.JSON_ERROR
    description = "Error while converting response to Json Value"


class NoResultsError(BittrexError):
    """결과 없음

    단건 조회 엔드포인트가 성공했지만 결과가 비어 있을 때 발생.
    """

    error_type = BittrexErrorType.NO_RESULTS
    description = "No results found"

    def _format(self, message: str) -> str:
        return f"{self.description} ({message})!"
