"""
설정 로더

secrets.yaml 로드 및 클라이언트 설정 생성

secrets.yaml 형식:
    api_key: "..."
    api_secret: "..."

    client:                    # 선택
      base_url: "https://bittrex.com/api/v1.1"
      timeout: 30
      http_proxy: "http://127.0.0.1:3128"
      https_proxy: "http://127.0.0.1:3128"
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from bittrex_api.core.constants import BittrexEndpoints, Defaults, Paths


@dataclass(frozen=True)
class Credentials:
    """API 인증 정보

    불변 데이터 구조로 클라이언트 수명 동안 변경 불가.
    api_secret은 HMAC 키로만 사용되며 repr에도 노출하지 않음.
    """

    api_key: str
    api_secret: str = field(repr=False)


@dataclass(frozen=True)
class ClientConfig:
    """클라이언트 연결 설정

    base_url 재정의는 Mock 서버 대상 통합 테스트에 사용.
    프록시는 전송 계층에 그대로 전달.
    """

    base_url: str = BittrexEndpoints.API_URL
    timeout: float = Defaults.TIMEOUT_SEC
    http_proxy: str | None = None
    https_proxy: str | None = None


class SecretsLoadError(Exception):
    """Secrets 로드 실패 예외"""

    pass


def _read_yaml(path: Path | None) -> dict[str, Any]:
    """YAML 파일을 딕셔너리로 로드"""
    if path is None:
        path = Paths.SECRETS_FILE

    if not path.exists():
        raise SecretsLoadError(f"secrets.yaml 파일을 찾을 수 없습니다: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SecretsLoadError(f"secrets.yaml 파싱 실패: {e}") from e

    if data is None:
        raise SecretsLoadError("secrets.yaml이 비어 있습니다")

    if not isinstance(data, dict):
        raise SecretsLoadError("secrets.yaml 최상위는 매핑이어야 합니다")

    return data


def load_secrets(path: Path | None = None) -> Credentials:
    """secrets.yaml에서 API 키 로드

    Args:
        path: secrets.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Credentials 인스턴스

    Raises:
        SecretsLoadError: 파일이 없거나 형식이 잘못된 경우
    """
    data = _read_yaml(path)

    api_key = data.get("api_key")
    api_secret = data.get("api_secret")

    if not api_key:
        raise SecretsLoadError("secrets.yaml에 'api_key'가 없습니다")
    if not api_secret:
        raise SecretsLoadError("secrets.yaml에 'api_secret'가 없습니다")

    return Credentials(api_key=str(api_key), api_secret=str(api_secret))


def load_client_config(path: Path | None = None) -> ClientConfig:
    """secrets.yaml의 client 섹션 로드

    섹션이 없으면 기본값 사용.

    Args:
        path: secrets.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        ClientConfig 인스턴스

    Raises:
        SecretsLoadError: 값이 잘못된 경우
    """
    data = _read_yaml(path)

    section = data.get("client") or {}
    if not isinstance(section, dict):
        raise SecretsLoadError("secrets.yaml의 'client'는 매핑이어야 합니다")

    base_url = section.get("base_url") or BittrexEndpoints.API_URL

    timeout_raw = section.get("timeout", Defaults.TIMEOUT_SEC)
    try:
        timeout = float(timeout_raw)
    except (TypeError, ValueError) as e:
        raise SecretsLoadError(f"유효하지 않은 timeout입니다: {timeout_raw!r}") from e
    if timeout <= 0:
        raise SecretsLoadError(f"timeout은 0보다 커야 합니다: {timeout}")

    return ClientConfig(
        base_url=str(base_url).rstrip("/"),
        timeout=timeout,
        http_proxy=section.get("http_proxy") or None,
        https_proxy=section.get("https_proxy") or None,
    )
