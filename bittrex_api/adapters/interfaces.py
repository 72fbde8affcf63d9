"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
모든 구현체는 이 Protocol을 준수해야 함.
"""

from decimal import Decimal
from typing import Protocol, runtime_checkable

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
from bittrex_api.core.types import OrderBookType


@runtime_checkable
class IBittrexRestClient(Protocol):
    """Bittrex REST API 클라이언트 인터페이스

    금액/수량은 반드시 Decimal 타입 사용.
    실패는 BittrexError 하위 예외로 전달.
    """

    # -------------------------------------------------------------------------
    # 공개 시세
    # -------------------------------------------------------------------------

    async def get_markets(self) -> list[Market]:
        """마켓 목록 조회"""
        ...

    async def get_currencies(self) -> list[Currency]:
        """지원 코인 목록 조회"""
        ...

    async def get_ticker(self, market: str) -> Ticker:
        """현재가 조회

        Args:
            market: 마켓 코드 (예: BTC-LTC)
        """
        ...

    async def get_market_summaries(self) -> list[MarketSummary]:
        """전체 마켓 요약 조회"""
        ...

    async def get_market_summary(self, market: str) -> MarketSummary:
        """단일 마켓 요약 조회"""
        ...

    async def get_order_book(
        self,
        market: str,
        order_type: OrderBookType | str = OrderBookType.BOTH,
    ) -> OrderBook:
        """호가창 조회"""
        ...

    async def get_market_history(self, market: str) -> list[Trade]:
        """최근 체결 내역 조회"""
        ...

    # -------------------------------------------------------------------------
    # 주문
    # -------------------------------------------------------------------------

    async def buy_limit(self, market: str, quantity: Decimal, rate: Decimal) -> Uuid:
        """지정가 매수

        Returns:
            주문 UUID
        """
        ...

    async def sell_limit(self, market: str, quantity: Decimal, rate: Decimal) -> Uuid:
        """지정가 매도"""
        ...

    async def cancel_order(self, uuid: str) -> None:
        """주문 취소"""
        ...

    async def get_open_orders(self, market: str | None = None) -> list[OpenOrder]:
        """미체결 주문 조회

        Args:
            market: 마켓 코드 (None이면 전체)
        """
        ...

    async def get_open_orders_by_market(self, market: str) -> list[OpenOrder]:
        ...

    async def get_order(self, uuid: str) -> Order:
        """단건 주문 조회"""
        ...

    async def get_order_history(self, market: str | None = None) -> list[HistoryOrder]:
        """주문 이력 조회"""
        ...

    async def get_order_history_by_market(self, market: str) -> list[HistoryOrder]:
        ...

    # -------------------------------------------------------------------------
    # 계좌
    # -------------------------------------------------------------------------

    async def get_balances(self) -> list[Balance]:
        """전체 잔고 조회"""
        ...

    async def get_balance(self, currency: str) -> Balance:
        """코인별 잔고 조회"""
        ...

    async def get_deposit_address(self, currency: str) -> Address:
        """입금 주소 조회"""
        ...

    async def withdraw(
        self,
        currency: str,
        quantity: Decimal,
        address: str,
        payment_id: str | None = None,
    ) -> Uuid:
        """출금 요청

        Returns:
            출금 UUID
        """
        ...

    async def get_withdrawal_history(self, currency: str | None = None) -> list[Transaction]:
        """출금 내역 조회"""
        ...

    async def get_withdrawal_history_by_currency(self, currency: str) -> list[Transaction]:
        ...

    async def get_deposit_history(self, currency: str | None = None) -> list[Transaction]:
        """입금 내역 조회"""
        ...

    async def get_deposit_history_by_currency(self, currency: str) -> list[Transaction]:
        ...

    async def close(self) -> None:
        """리소스 정리"""
        ...
