"""
Bittrex REST API 클라이언트

HMAC-SHA512 서명, 응답 정규화, Decimal 사용.
IBittrexRestClient Protocol 준수.
"""

import logging
from collections.abc import Callable
from decimal import Decimal
from pathlib import Path
from typing import Any

import httpx

from bittrex_api.adapters.bittrex.endpoints import Endpoint, get_endpoint
from bittrex_api.adapters.bittrex.errors import BittrexApiError, BittrexJsonError
from bittrex_api.adapters.bittrex.models import (
    Address,
    Balance,
    Currency,
    HistoryOrder,
    Market,
    MarketSummary,
    OpenOrder,
    Order,
    OrderBook,
    Ticker,
    Trade,
    Transaction,
    Uuid,
)
from bittrex_api.adapters.bittrex.normalizer import normalize_response
from bittrex_api.adapters.bittrex.signer import RequestSigner, build_url
from bittrex_api.core.config.loader import (
    ClientConfig,
    Credentials,
    load_client_config,
    load_secrets,
)
from bittrex_api.core.types import OrderBookType
from bittrex_api.core.utils.numbers import format_decimal

logger = logging.getLogger(__name__)


class BittrexRestClient:
    """Bittrex REST API 클라이언트

    IBittrexRestClient Protocol 구현.
    모든 금액/수량은 Decimal 타입으로 반환.
    각 엔드포인트 메서드는 선언 테이블(endpoints.py) 위의 얇은 래퍼이며
    실제 요청은 _call()이 처리.

    Args:
        api_key: API 키
        api_secret: API 시크릿
        config: 연결 설정 (None이면 기본값)
        nonce_source: nonce 공급 함수 (테스트용)
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        config: ClientConfig | None = None,
        nonce_source: Callable[[], int] | None = None,
    ):
        self.config = config or ClientConfig()
        self.base_url = self.config.base_url.rstrip("/")
        self.timeout = self.config.timeout

        self._signer = RequestSigner(
            Credentials(api_key=api_key, api_secret=api_secret),
            nonce_source=nonce_source,
        )
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_file(cls, path: Path | None = None) -> "BittrexRestClient":
        """secrets.yaml 하나로 클라이언트 생성

        Args:
            path: secrets.yaml 경로 (None이면 기본 경로)

        Raises:
            SecretsLoadError: 파일이 없거나 형식이 잘못된 경우
        """
        credentials = load_secrets(path)
        config = load_client_config(path)
        return cls(credentials.api_key, credentials.api_secret, config=config)

    def _build_mounts(self) -> dict[str, httpx.AsyncHTTPTransport] | None:
        """스킴별 프록시 transport 구성"""
        mounts: dict[str, httpx.AsyncHTTPTransport] = {}
        if self.config.http_proxy:
            mounts["http://"] = httpx.AsyncHTTPTransport(proxy=self.config.http_proxy)
        if self.config.https_proxy:
            mounts["https://"] = httpx.AsyncHTTPTransport(proxy=self.config.https_proxy)
        return mounts or None

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 가져오기 (lazy initialization)"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                mounts=self._build_mounts(),
            )
        return self._client

    async def close(self) -> None:
        """HTTP 클라이언트 종료"""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "BittrexRestClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _request(
        self,
        path: str,
        params: dict[str, str] | None = None,
        private: bool = False,
    ) -> Any:
        """API 요청 실행

        Args:
            path: API 경로 (예: /public/getmarkets)
            params: 쿼리 파라미터
            private: 서명 필요 여부

        HTTP 상태 코드는 보지 않음. 4xx/5xx 응답도 본문을 그대로 반환하며
        실패 여부는 envelope의 success 필드로 판단.

        Returns:
            JSON 디코딩된 응답 본문

        Raises:
            BittrexApiError: 전송 계층 실패
            BittrexJsonError: 본문이 JSON이 아닌 경우
        """
        url = f"{self.base_url}{path}"
        headers: dict[str, str] = {}

        # private 요청은 서명된 URL 그대로 전송 (서명 대상과 요청 URL이 같아야 함)
        if private:
            signed = self._signer.sign(url, params)
            url = signed.url
            headers = signed.headers
        else:
            url = build_url(url, params)

        client = await self._get_client()

        try:
            response = await client.get(url, headers=headers)

        except httpx.TimeoutException as e:
            logger.warning("Request timeout", extra={"path": path})
            raise BittrexApiError(f"Timeout: {type(e).__name__}") from e

        except httpx.TooManyRedirects as e:
            logger.error("Redirect loop", extra={"path": path})
            raise BittrexApiError("Redirect loop: too many redirects") from e

        except httpx.HTTPError as e:
            logger.error(
                "Request error",
                extra={"path": path, "error": type(e).__name__},
            )
            raise BittrexApiError(f"Request error: {type(e).__name__}") from e

        try:
            return response.json()
        except ValueError as e:
            logger.error("Invalid JSON body", extra={"path": path})
            raise BittrexJsonError(f"응답 본문이 JSON이 아닙니다: {e}") from e

    async def _call(self, name: str, **params: str | None) -> Any:
        """선언 테이블 기반 엔드포인트 호출

        Args:
            name: 엔드포인트 이름 (ENDPOINTS 키)
            **params: 쿼리 파라미터 (None이면 선택 파라미터 생략)

        Returns:
            정규화된 결과 (레코드, 레코드 목록, 또는 None)
        """
        endpoint: Endpoint = get_endpoint(name)
        query = endpoint.build_params(params)

        data = await self._request(endpoint.path, query, private=endpoint.private)

        try:
            return normalize_response(
                data,
                endpoint.shape,
                endpoint.cardinality,
                endpoint.parser,
            )
        except BittrexApiError as e:
            logger.warning(
                "Bittrex API rejected request",
                extra={"path": endpoint.path, "error": e.message},
            )
            raise

    # -------------------------------------------------------------------------
    # 공개 시세
    # -------------------------------------------------------------------------

    async def get_markets(self) -> list[Market]:
        """마켓 목록 조회"""
        return await self._call("get_markets")

    async def get_currencies(self) -> list[Currency]:
        """지원 코인 목록 조회"""
        return await self._call("get_currencies")

    async def get_ticker(self, market: str) -> Ticker:
        """현재가 조회

        Args:
            market: 마켓 코드 (예: BTC-LTC)

        Raises:
            BittrexApiError: 존재하지 않는 마켓 (INVALID_MARKET)
            NoResultsError: 결과 없음
        """
        return await self._call("get_ticker", market=market)

    async def get_market_summaries(self) -> list[MarketSummary]:
        """전체 마켓 24시간 요약 조회"""
        return await self._call("get_market_summaries")

    async def get_market_summary(self, market: str) -> MarketSummary:
        """단일 마켓 24시간 요약 조회

        응답은 1개짜리 배열이며 0개/2개 이상이면 에러.
        """
        return await self._call("get_market_summary", market=market)

    async def get_order_book(
        self,
        market: str,
        order_type: OrderBookType | str = OrderBookType.BOTH,
    ) -> OrderBook:
        """호가창 조회

        Buy/Sell을 지정하면 해당 방향만 채워진 OrderBook 반환.

        Args:
            market: 마켓 코드
            order_type: Buy, Sell, Both (대소문자 무관)

        Raises:
            ValueError: 정의되지 않은 type 값
        """
        book_type = OrderBookType(order_type)

        if book_type is OrderBookType.BOTH:
            return await self._call("get_order_book", market=market, type=book_type.value)

        orders = await self._call("get_order_book_side", market=market, type=book_type.value)
        if book_type is OrderBookType.BUY:
            return OrderBook(buy=orders)
        return OrderBook(sell=orders)

    async def get_market_history(self, market: str) -> list[Trade]:
        """최근 체결 내역 조회"""
        return await self._call("get_market_history", market=market)

    # -------------------------------------------------------------------------
    # 주문
    # -------------------------------------------------------------------------

    async def buy_limit(self, market: str, quantity: Decimal, rate: Decimal) -> Uuid:
        """지정가 매수

        Args:
            market: 마켓 코드
            quantity: 수량
            rate: 가격

        Returns:
            주문 UUID
        """
        logger.info("Placing buy limit order", extra={"market": market})
        return await self._call(
            "buy_limit",
            market=market,
            quantity=format_decimal(quantity),
            rate=format_decimal(rate),
        )

    async def sell_limit(self, market: str, quantity: Decimal, rate: Decimal) -> Uuid:
        """지정가 매도"""
        logger.info("Placing sell limit order", extra={"market": market})
        return await self._call(
            "sell_limit",
            market=market,
            quantity=format_decimal(quantity),
            rate=format_decimal(rate),
        )

    async def cancel_order(self, uuid: str) -> None:
        """주문 취소 (result는 사용하지 않음)"""
        await self._call("cancel_order", uuid=uuid)
        logger.info("Order canceled", extra={"uuid": uuid})

    async def get_open_orders(self, market: str | None = None) -> list[OpenOrder]:
        """미체결 주문 조회

        Args:
            market: 마켓 코드 (None이면 전체)
        """
        return await self._call("get_open_orders", market=market)

    async def get_open_orders_by_market(self, market: str) -> list[OpenOrder]:
        """특정 마켓 미체결 주문 조회"""
        return await self._call("get_open_orders", market=market)

    async def get_order(self, uuid: str) -> Order:
        """단건 주문 조회"""
        return await self._call("get_order", uuid=uuid)

    async def get_order_history(self, market: str | None = None) -> list[HistoryOrder]:
        """주문 이력 조회"""
        return await self._call("get_order_history", market=market)

    async def get_order_history_by_market(self, market: str) -> list[HistoryOrder]:
        """특정 마켓 주문 이력 조회"""
        return await self._call("get_order_history", market=market)

    # -------------------------------------------------------------------------
    # 계좌
    # -------------------------------------------------------------------------

    async def get_balances(self) -> list[Balance]:
        """전체 잔고 조회"""
        return await self._call("get_balances")

    async def get_balance(self, currency: str) -> Balance:
        """코인별 잔고 조회"""
        return await self._call("get_balance", currency=currency)

    async def get_deposit_address(self, currency: str) -> Address:
        """입금 주소 조회"""
        return await self._call("get_deposit_address", currency=currency)

    async def withdraw(
        self,
        currency: str,
        quantity: Decimal,
        address: str,
        payment_id: str | None = None,
    ) -> Uuid:
        """출금 요청

        Args:
            currency: 코인 코드
            quantity: 수량
            address: 출금 주소
            payment_id: 메모/태그 (필요한 코인만, None이면 생략)

        Returns:
            출금 UUID
        """
        logger.info("Requesting withdrawal", extra={"currency": currency})
        return await self._call(
            "withdraw",
            currency=currency,
            quantity=format_decimal(quantity),
            address=address,
            paymentid=payment_id,
        )

    async def get_withdrawal_history(self, currency: str | None = None) -> list[Transaction]:
        """출금 내역 조회"""
        return await self._call("get_withdrawal_history", currency=currency)

    async def get_withdrawal_history_by_currency(self, currency: str) -> list[Transaction]:
        """코인별 출금 내역 조회"""
        return await self._call("get_withdrawal_history", currency=currency)

    async def get_deposit_history(self, currency: str | None = None) -> list[Transaction]:
        """입금 내역 조회"""
        return await self._call("get_deposit_history", currency=currency)

    async def get_deposit_history_by_currency(self, currency: str) -> list[Transaction]:
        """코인별 입금 내역 조회"""
        return await self._call("get_deposit_history", currency=currency)
