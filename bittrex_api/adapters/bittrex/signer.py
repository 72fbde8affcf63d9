"""
Bittrex 요청 서명

private 엔드포인트 호출 시 URL에 apikey/nonce를 덧붙이고,
그 전체 URL에 대한 HMAC-SHA512 서명을 apisign 헤더 값으로 생성.
"""

import hashlib
import hmac
import threading
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from urllib.parse import urlencode

from bittrex_api.core.config.loader import Credentials
from bittrex_api.core.constants import AuthParams


@dataclass(frozen=True)
class SignedRequest:
    """서명된 요청

    호출마다 새로 생성되며 재사용하지 않음 (nonce 재사용은 거래소가 거부).

    Attributes:
        url: apikey, nonce가 포함된 전체 URL (요청과 서명 모두 이 URL 사용)
        signature: 대문자 16진수 HMAC-SHA512 (128자)
    """

    url: str
    signature: str = field(repr=False)

    @property
    def headers(self) -> dict[str, str]:
        """요청 헤더"""
        return {AuthParams.SIGNATURE_HEADER: self.signature}


def build_url(url: str, params: Mapping[str, str] | None = None) -> str:
    """쿼리 스트링이 붙은 URL 생성

    Args:
        url: base_url + path
        params: 쿼리 파라미터 (삽입 순서 유지)

    Returns:
        파라미터가 없으면 url 그대로, 있으면 url?k=v&...
    """
    if not params:
        return url
    return f"{url}?{urlencode(list(params.items()))}"


def generate_signature(secret: str, message: str) -> str:
    """HMAC-SHA512 서명 생성

    Args:
        secret: API 시크릿 (키 재료)
        message: 서명할 전체 URL

    Returns:
        대문자 16진수 서명 문자열 (128자)
    """
    return hmac.new(
        secret.encode("utf-8"),
        message.encode("utf-8"),
        hashlib.sha512,
    ).hexdigest().upper()


class NonceGenerator:
    """요청별 nonce 생성기

    나노초 타임스탬프 기반이며, 같은 나노초에 여러 요청이 들어오거나
    시계가 뒤로 가더라도 항상 직전 값보다 큰 값을 반환.
    """

    def __init__(self) -> None:
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            nonce = max(time.time_ns(), self._last + 1)
            self._last = nonce
            return nonce


class RequestSigner:
    """Bittrex 요청 서명기

    Args:
        credentials: API 키/시크릿
        nonce_source: nonce 공급 함수 (테스트에서 고정값 주입용)
    """

    def __init__(
        self,
        credentials: Credentials,
        nonce_source: Callable[[], int] | None = None,
    ):
        self._credentials = credentials
        self._nonce_source = nonce_source or NonceGenerator()

    @property
    def api_key(self) -> str:
        """API 키"""
        return self._credentials.api_key

    def sign(self, url: str, params: Mapping[str, str] | None = None) -> SignedRequest:
        """요청 서명

        호출자의 파라미터 뒤에 apikey, nonce를 붙인 URL을 만들고 그 URL 전체를 서명.

        Args:
            url: base_url + path
            params: 호출자 쿼리 파라미터 (문자열 값)

        Returns:
            SignedRequest
        """
        query: dict[str, str] = dict(params or {})
        query[AuthParams.API_KEY_PARAM] = self._credentials.api_key
        query[AuthParams.NONCE_PARAM] = str(self._nonce_source())

        full_url = build_url(url, query)
        signature = generate_signature(self._credentials.api_secret, full_url)

        return SignedRequest(url=full_url, signature=signature)
