"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


class BittrexEndpoints:
    """Bittrex API 엔드포인트 (고정값)

    공식 문서: https://bittrex.github.io/api/v1-1
    """

    API_URL: str = "https://bittrex.com/api/v1.1"


class AuthParams:
    """인증 관련 파라미터/헤더 이름"""

    API_KEY_PARAM: str = "apikey"
    NONCE_PARAM: str = "nonce"
    SIGNATURE_HEADER: str = "apisign"


class Defaults:
    """기본값 상수"""

    TIMEOUT_SEC: float = 30.0
    LOG_LEVEL: str = "INFO"


class Messages:
    """응답 정규화 에러 메시지"""

    NO_RESULTS: str = "Maybe check your parameters?"
    MULTIPLE_RESULTS: str = "Multiple results found! Maybe check your parameters?"


class Paths:
    """프로젝트 경로 상수 (실행 디렉토리 기준 상대 경로)"""

    CONFIG_DIR: Path = Path("config")
    LOGS_DIR: Path = Path("logs")

    # 설정 파일
    SECRETS_FILE: Path = CONFIG_DIR / "secrets.yaml"
