"""
Mock Bittrex 클라이언트

테스트용 Mock REST 클라이언트.
IBittrexRestClient Protocol 준수.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from bittrex_api.adapters.bittrex.endpoints import get_endpoint
from bittrex_api.adapters.bittrex.errors import BittrexApiError, BittrexError, NoResultsError
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
from bittrex_api.core.constants import Messages
from bittrex_api.core.types import Cardinality, OrderBookType


@dataclass
class MockState:
    """Mock 상태 (메모리 내 저장)"""

    # 준비된 응답 (메서드 이름 -> 반환값 또는 BittrexError)
    responses: dict[str, Any] = field(default_factory=dict)

    # 시뮬레이션 옵션
    should_fail_next_call: bool = False
    next_error_message: str = "Mock error"

    # 호출 기록 (메서드 이름, 인자)
    calls: list[tuple[str, dict[str, Any]]] = field(default_factory=list)


class MockBittrexRestClient:
    """Mock REST 클라이언트

    IBittrexRestClient Protocol 구현.
    네트워크 없이 메서드별로 준비된 응답을 돌려줌.
    응답이 없으면 목록 엔드포인트는 빈 목록, 단건 엔드포인트는 NoResultsError.
    주문 체결이나 잔고 계산은 하지 않음.

    사용 예시:
    ```python
    client = MockBittrexRestClient()

    # 응답 준비
    client.set_response("buy_limit", Uuid(uuid="..."))
    client.set_response("get_balance", BittrexApiError("INVALID_CURRENCY"))

    # 호출 확인
    await client.buy_limit("BTC-LTC", Decimal("1"), Decimal("0.01"))
    assert client.state.calls[-1][0] == "buy_limit"
    ```
    """

    def __init__(self, state: MockState | None = None):
        self.state = state or MockState()

    # -------------------------------------------------------------------------
    # 상태 조작 메서드 (테스트용)
    # -------------------------------------------------------------------------

    def set_response(self, method: str, response: Any) -> None:
        """메서드 응답 설정

        Args:
            method: 엔드포인트 이름 (예: get_ticker)
            response: 반환값. BittrexError 인스턴스면 호출 시 발생

        Raises:
            KeyError: 선언되지 않은 엔드포인트
        """
        get_endpoint(method)
        self.state.responses[method] = response

    def set_fail_next_call(self, message: str = "Mock error") -> None:
        """다음 호출 실패 설정 (success=false 응답과 동일하게 BittrexApiError)"""
        self.state.should_fail_next_call = True
        self.state.next_error_message = message

    def calls_to(self, method: str) -> list[dict[str, Any]]:
        """특정 메서드 호출 인자 목록"""
        return [params for name, params in self.state.calls if name == method]

    # -------------------------------------------------------------------------
    # 내부 헬퍼
    # -------------------------------------------------------------------------

    def _respond(self, name: str, **params: Any) -> Any:
        """호출 기록 후 준비된 응답 반환"""
        self.state.calls.append((name, params))

        if self.state.should_fail_next_call:
            self.state.should_fail_next_call = False
            raise BittrexApiError(self.state.next_error_message)

        if name not in self.state.responses:
            cardinality = get_endpoint(name).cardinality
            if cardinality is Cardinality.MANY:
                return []
            if cardinality is Cardinality.NONE:
                return None
            raise NoResultsError(Messages.NO_RESULTS)

        response = self.state.responses[name]
        if isinstance(response, BittrexError):
            raise response
        if isinstance(response, list):
            return list(response)
        return response

    # -------------------------------------------------------------------------
    # 공개 시세
    # -------------------------------------------------------------------------

    async def get_markets(self) -> list[Market]:
        """마켓 목록 조회"""
        return self._respond("get_markets")

    async def get_currencies(self) -> list[Currency]:
        """코인 목록 조회"""
        return self._respond("get_currencies")

    async def get_ticker(self, market: str) -> Ticker:
        """현재가 조회"""
        return self._respond("get_ticker", market=market)

    async def get_market_summaries(self) -> list[MarketSummary]:
        """전체 마켓 요약 조회"""
        return self._respond("get_market_summaries")

    async def get_market_summary(self, market: str) -> MarketSummary:
        """단일 마켓 요약 조회"""
        return self._respond("get_market_summary", market=market)

    async def get_order_book(
        self,
        market: str,
        order_type: OrderBookType | str = OrderBookType.BOTH,
    ) -> OrderBook:
        """호가창 조회 (Buy/Sell이면 해당 방향만 반환)"""
        book_type = OrderBookType(order_type)
        book = self._respond("get_order_book", market=market, type=book_type.value)

        if book_type is OrderBookType.BUY:
            return OrderBook(buy=list(book.buy))
        if book_type is OrderBookType.SELL:
            return OrderBook(sell=list(book.sell))
        return book

    async def get_market_history(self, market: str) -> list[Trade]:
        """최근 체결 내역 조회"""
        return self._respond("get_market_history", market=market)

    # -------------------------------------------------------------------------
    # 주문
    # -------------------------------------------------------------------------

    async def buy_limit(self, market: str, quantity: Decimal, rate: Decimal) -> Uuid:
        """지정가 매수"""
        return self._respond("buy_limit", market=market, quantity=quantity, rate=rate)

    async def sell_limit(self, market: str, quantity: Decimal, rate: Decimal) -> Uuid:
        """지정가 매도"""
        return self._respond("sell_limit", market=market, quantity=quantity, rate=rate)

    async def cancel_order(self, uuid: str) -> None:
        """주문 취소"""
        self._respond("cancel_order", uuid=uuid)

    async def get_open_orders(self, market: str | None = None) -> list[OpenOrder]:
        """미체결 주문 조회"""
        return self._respond("get_open_orders", market=market)

    async def get_open_orders_by_market(self, market: str) -> list[OpenOrder]:
        """특정 마켓 미체결 주문 조회"""
        return await self.get_open_orders(market)

    async def get_order(self, uuid: str) -> Order:
        """단건 주문 조회"""
        return self._respond("get_order", uuid=uuid)

    async def get_order_history(self, market: str | None = None) -> list[HistoryOrder]:
        """주문 이력 조회"""
        return self._respond("get_order_history", market=market)

    async def get_order_history_by_market(self, market: str) -> list[HistoryOrder]:
        """특정 마켓 주문 이력 조회"""
        return await self.get_order_history(market)

    # -------------------------------------------------------------------------
    # 계좌
    # -------------------------------------------------------------------------

    async def get_balances(self) -> list[Balance]:
        """잔고 목록 조회"""
        return self._respond("get_balances")

    async def get_balance(self, currency: str) -> Balance:
        """코인별 잔고 조회"""
        return self._respond("get_balance", currency=currency)

    async def get_deposit_address(self, currency: str) -> Address:
        """입금 주소 조회"""
        return self._respond("get_deposit_address", currency=currency)

    async def withdraw(
        self,
        currency: str,
        quantity: Decimal,
        address: str,
        payment_id: str | None = None,
    ) -> Uuid:
        """출금 요청"""
        return self._respond(
            "withdraw",
            currency=currency,
            quantity=quantity,
            address=address,
            payment_id=payment_id,
        )

    async def get_withdrawal_history(self, currency: str | None = None) -> list[Transaction]:
        """출금 내역 조회"""
        return self._respond("get_withdrawal_history", currency=currency)

    async def get_withdrawal_history_by_currency(self, currency: str) -> list[Transaction]:
        """코인별 출금 내역 조회"""
        return await self.get_withdrawal_history(currency)

    async def get_deposit_history(self, currency: str | None = None) -> list[Transaction]:
        """입금 내역 조회"""
        return self._respond("get_deposit_history", currency=currency)

    async def get_deposit_history_by_currency(self, currency: str) -> list[Transaction]:
        """코인별 입금 내역 조회"""
        return await self.get_deposit_history(currency)

    async def close(self) -> None:
        """리소스 정리 (Mock은 없음)"""
        pass
