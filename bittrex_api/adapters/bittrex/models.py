"""
Bittrex API 응답 모델

Bittrex REST API 응답을 파싱하여 데이터클래스로 변환.
거래소 필드명(PascalCase)을 snake_case 속성으로 매핑.
모든 금액/수량은 Decimal, 시각은 UTC datetime 사용.

from_api()는 필수 필드 누락 시 KeyError, 값 형식 오류 시 ValueError/TypeError를
그대로 발생시키며, 호출 측(normalizer)에서 BittrexJsonError로 변환.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any

from bittrex_api.core.utils.numbers import to_decimal, to_optional_decimal
from bittrex_api.core.utils.timezone import parse_api_timestamp, parse_optional_timestamp


@dataclass(frozen=True)
class ResponseEnvelope:
    """공통 응답 래퍼

    Attributes:
        success: 성공 여부
        message: 실패 시 사유 (성공 시 빈 문자열)
        result: 디코딩 전 result 값 (None, dict, list)
    """

    success: bool
    message: str
    result: Any = None

    @classmethod
    def from_api(cls, data: Any) -> "ResponseEnvelope":
        """API 응답에서 생성

        Raises:
            ValueError: envelope 형식이 아닌 경우
        """
        if not isinstance(data, dict):
            raise ValueError(f"응답이 JSON 객체가 아닙니다: {type(data).__name__}")

        success = data.get("success")
        if not isinstance(success, bool):
            raise ValueError("응답에 boolean 'success' 필드가 없습니다")

        message = data.get("message") or ""
        if not isinstance(message, str):
            raise ValueError("응답의 'message' 필드가 문자열이 아닙니다")

        return cls(success=success, message=message, result=data.get("result"))


@dataclass(frozen=True)
class Uuid:
    """주문/출금 요청 시 생성된 식별자"""

    uuid: str

    def __str__(self) -> str:
        return self.uuid

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Uuid":
        """API 응답에서 생성"""
        return cls(uuid=data["uuid"])


@dataclass(frozen=True)
class Address:
    """입금 주소"""

    currency: str
    address: str

    def __str__(self) -> str:
        return f"Currency: {self.currency} (Address: {self.address})"

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Address":
        """API 응답에서 생성"""
        return cls(currency=data["Currency"], address=data["Address"])


@dataclass(frozen=True)
class Currency:
    """지원 코인 정보

    Attributes:
        currency: 코인 코드 (예: BTC)
        currency_long: 코인 이름 (예: Bitcoin)
        min_confirmation: 입금 확정에 필요한 최소 컨펌 수
        tx_fee: 출금 수수료
        is_active: 활성 여부
        coin_type: 코인 유형 (예: BITCOIN)
        base_address: 기본 입금 주소 (메모 방식 코인)
        notice: 공지
    """

    currency: str
    currency_long: str
    min_confirmation: int
    tx_fee: Decimal
    is_active: bool
    coin_type: str | None = None
    base_address: str | None = None
    notice: str | None = None

    def __str__(self) -> str:
        return (
            f"{self.currency} (Min. Confirmations: {self.min_confirmation}, "
            f"Tx Fee: {self.tx_fee})"
        )

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Currency":
        """API 응답에서 생성"""
        return cls(
            currency=data["Currency"],
            currency_long=data["CurrencyLong"],
            min_confirmation=int(data["MinConfirmation"]),
            tx_fee=to_decimal(data["TxFee"]),
            is_active=bool(data["IsActive"]),
            coin_type=data.get("CoinType"),
            base_address=data.get("BaseAddress"),
            notice=data.get("Notice"),
        )


@dataclass(frozen=True)
class Market:
    """마켓 정보

    Attributes:
        market_currency: 거래 대상 코인 (예: LTC)
        base_currency: 기준 코인 (예: BTC)
        market_currency_long: 거래 대상 코인 이름
        base_currency_long: 기준 코인 이름
        min_trade_size: 최소 주문 수량
        market_name: 마켓 코드 (예: BTC-LTC)
        is_active: 활성 여부
        created: 마켓 생성 시각
    """

    market_currency: str
    base_currency: str
    market_currency_long: str
    base_currency_long: str
    min_trade_size: Decimal
    market_name: str
    is_active: bool
    created: datetime

    def __str__(self) -> str:
        return f"{self.market_name} (Min. Trade Size: {self.min_trade_size})"

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Market":
        """API 응답에서 생성"""
        return cls(
            market_currency=data["MarketCurrency"],
            base_currency=data["BaseCurrency"],
            market_currency_long=data["MarketCurrencyLong"],
            base_currency_long=data["BaseCurrencyLong"],
            min_trade_size=to_decimal(data["MinTradeSize"]),
            market_name=data["MarketName"],
            is_active=bool(data["IsActive"]),
            created=parse_api_timestamp(data["Created"]),
        )


@dataclass(frozen=True)
class MarketSummary:
    """마켓 24시간 요약"""

    market_name: str
    high: Decimal
    low: Decimal
    volume: Decimal
    last: Decimal
    base_volume: Decimal
    time_stamp: datetime
    bid: Decimal
    ask: Decimal
    open_buy_orders: int
    open_sell_orders: int
    prev_day: Decimal
    created: datetime
    display_market_name: str | None = None

    def __str__(self) -> str:
        return (
            f"{self.market_name} (High: {self.high}, Low: {self.low}, "
            f"Volume: {self.volume})"
        )

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "MarketSummary":
        """API 응답에서 생성"""
        return cls(
            market_name=data["MarketName"],
            high=to_decimal(data["High"]),
            low=to_decimal(data["Low"]),
            volume=to_decimal(data["Volume"]),
            last=to_decimal(data["Last"]),
            base_volume=to_decimal(data["BaseVolume"]),
            time_stamp=parse_api_timestamp(data["TimeStamp"]),
            bid=to_decimal(data["Bid"]),
            ask=to_decimal(data["Ask"]),
            open_buy_orders=int(data["OpenBuyOrders"]),
            open_sell_orders=int(data["OpenSellOrders"]),
            prev_day=to_decimal(data["PrevDay"]),
            created=parse_api_timestamp(data["Created"]),
            display_market_name=data.get("DisplayMarketName"),
        )


@dataclass(frozen=True)
class Ticker:
    """현재가"""

    bid: Decimal
    ask: Decimal
    last: Decimal

    def __str__(self) -> str:
        return f"(Ask: {self.ask}, Bid: {self.bid}, Last: {self.last})"

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Ticker":
        """API 응답에서 생성"""
        return cls(
            bid=to_decimal(data["Bid"]),
            ask=to_decimal(data["Ask"]),
            last=to_decimal(data["Last"]),
        )


@dataclass(frozen=True)
class PublicOrder:
    """호가 한 줄"""

    quantity: Decimal
    rate: Decimal

    def __str__(self) -> str:
        return f"(Quantity: {self.quantity}, Rate: {self.rate})"

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "PublicOrder":
        """API 응답에서 생성"""
        return cls(
            quantity=to_decimal(data["Quantity"]),
            rate=to_decimal(data["Rate"]),
        )


@dataclass(frozen=True)
class OrderBook:
    """호가창

    Attributes:
        buy: 매수 호가 목록
        sell: 매도 호가 목록
    """

    buy: list[PublicOrder] = field(default_factory=list)
    sell: list[PublicOrder] = field(default_factory=list)

    def __str__(self) -> str:
        return f"(Buy Quantity: {len(self.buy)}, Sell Quantity: {len(self.sell)})"

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "OrderBook":
        """API 응답에서 생성

        type=both 응답: {"buy": [...], "sell": [...]}
        """
        buy = data.get("buy", data.get("Buy")) or []
        sell = data.get("sell", data.get("Sell")) or []
        return cls(
            buy=[PublicOrder.from_api(item) for item in buy],
            sell=[PublicOrder.from_api(item) for item in sell],
        )


@dataclass(frozen=True)
class Trade:
    """마켓 체결 내역"""

    id: int
    time_stamp: datetime
    quantity: Decimal
    price: Decimal
    total: Decimal
    fill_type: str
    order_type: str

    def __str__(self) -> str:
        return (
            f"ID: {self.id} (Quantity: {self.quantity}, Price: {self.price}, "
            f"Total: {self.total})"
        )

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Trade":
        """API 응답에서 생성"""
        return cls(
            id=int(data["Id"]),
            time_stamp=parse_api_timestamp(data["TimeStamp"]),
            quantity=to_decimal(data["Quantity"]),
            price=to_decimal(data["Price"]),
            total=to_decimal(data["Total"]),
            fill_type=data["FillType"],
            order_type=data["OrderType"],
        )


def _condition_target(data: dict[str, Any]) -> str | None:
    # 문서에는 ConditionTarget, 일부 응답에는 ConditionalTarget
    return data.get("ConditionTarget", data.get("ConditionalTarget"))


@dataclass(frozen=True)
class OpenOrder:
    """미체결 주문"""

    order_uuid: str
    exchange: str
    order_type: str
    quantity: Decimal
    quantity_remaining: Decimal
    limit: Decimal
    commission_paid: Decimal
    price: Decimal
    opened: datetime
    cancel_initiated: bool
    immediate_or_cancel: bool
    is_conditional: bool
    uuid: str | None = None
    price_per_unit: Decimal | None = None
    closed: datetime | None = None
    condition: str | None = None
    condition_target: str | None = None

    def __str__(self) -> str:
        return (
            f"Uuid: {self.order_uuid} (Exchange: {self.exchange}, "
            f"Order Type: {self.order_type}, Quantity: {self.quantity}, "
            f"Limit: {self.limit})"
        )

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "OpenOrder":
        """API 응답에서 생성"""
        return cls(
            order_uuid=data["OrderUuid"],
            exchange=data["Exchange"],
            order_type=data["OrderType"],
            quantity=to_decimal(data["Quantity"]),
            quantity_remaining=to_decimal(data["QuantityRemaining"]),
            limit=to_decimal(data["Limit"]),
            commission_paid=to_decimal(data["CommissionPaid"]),
            price=to_decimal(data["Price"]),
            opened=parse_api_timestamp(data["Opened"]),
            cancel_initiated=bool(data["CancelInitiated"]),
            immediate_or_cancel=bool(data["ImmediateOrCancel"]),
            is_conditional=bool(data["IsConditional"]),
            uuid=data.get("Uuid"),
            price_per_unit=to_optional_decimal(data.get("PricePerUnit")),
            closed=parse_optional_timestamp(data.get("Closed")),
            condition=data.get("Condition"),
            condition_target=_condition_target(data),
        )


@dataclass(frozen=True)
class HistoryOrder:
    """주문 이력"""

    order_uuid: str
    exchange: str
    time_stamp: datetime
    order_type: str
    quantity: Decimal
    quantity_remaining: Decimal
    limit: Decimal
    commission: Decimal
    price: Decimal
    immediate_or_cancel: bool
    is_conditional: bool
    price_per_unit: Decimal | None = None
    condition: str | None = None
    condition_target: str | None = None

    def __str__(self) -> str:
        return (
            f"Uuid: {self.order_uuid} (Exchange: {self.exchange}, "
            f"Type: {self.order_type}, Quantity: {self.quantity}, "
            f"Limit: {self.limit})"
        )

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "HistoryOrder":
        """API 응답에서 생성"""
        return cls(
            order_uuid=data["OrderUuid"],
            exchange=data["Exchange"],
            time_stamp=parse_api_timestamp(data["TimeStamp"]),
            order_type=data["OrderType"],
            quantity=to_decimal(data["Quantity"]),
            quantity_remaining=to_decimal(data["QuantityRemaining"]),
            limit=to_decimal(data["Limit"]),
            commission=to_decimal(data["Commission"]),
            price=to_decimal(data["Price"]),
            immediate_or_cancel=bool(data["ImmediateOrCancel"]),
            is_conditional=bool(data["IsConditional"]),
            price_per_unit=to_optional_decimal(data.get("PricePerUnit")),
            condition=data.get("Condition"),
            condition_target=_condition_target(data),
        )


@dataclass(frozen=True)
class Order:
    """단건 주문 상세 (account/getorder)"""

    order_uuid: str
    exchange: str
    order_type: str
    quantity: Decimal
    quantity_remaining: Decimal
    limit: Decimal
    reserved: Decimal
    reserve_remaining: Decimal
    commission_reserved: Decimal
    commission_reserve_remaining: Decimal
    commission_paid: Decimal
    price: Decimal
    opened: datetime
    is_open: bool
    sentinel: str
    cancel_initiated: bool
    immediate_or_cancel: bool
    is_conditional: bool
    account_id: str | None = None
    price_per_unit: Decimal | None = None
    closed: datetime | None = None
    condition: str | None = None
    condition_target: str | None = None

    def __str__(self) -> str:
        return (
            f"Uuid: {self.order_uuid} (Exchange: {self.exchange}, "
            f"Type: {self.order_type}, Quantity: {self.quantity}, "
            f"Limit: {self.limit}, Is Open: {self.is_open})"
        )

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Order":
        """API 응답에서 생성"""
        return cls(
            order_uuid=data["OrderUuid"],
            exchange=data["Exchange"],
            order_type=data["Type"],
            quantity=to_decimal(data["Quantity"]),
            quantity_remaining=to_decimal(data["QuantityRemaining"]),
            limit=to_decimal(data["Limit"]),
            reserved=to_decimal(data["Reserved"]),
            reserve_remaining=to_decimal(data["ReserveRemaining"]),
            commission_reserved=to_decimal(data["CommissionReserved"]),
            commission_reserve_remaining=to_decimal(data["CommissionReserveRemaining"]),
            commission_paid=to_decimal(data["CommissionPaid"]),
            price=to_decimal(data["Price"]),
            opened=parse_api_timestamp(data["Opened"]),
            is_open=bool(data["IsOpen"]),
            sentinel=data["Sentinel"],
            cancel_initiated=bool(data["CancelInitiated"]),
            immediate_or_cancel=bool(data["ImmediateOrCancel"]),
            is_conditional=bool(data["IsConditional"]),
            account_id=data.get("AccountId"),
            price_per_unit=to_optional_decimal(data.get("PricePerUnit")),
            closed=parse_optional_timestamp(data.get("Closed")),
            condition=data.get("Condition"),
            condition_target=_condition_target(data),
        )


@dataclass(frozen=True)
class Transaction:
    """입금/출금 내역"""

    payment_uuid: str
    currency: str
    amount: Decimal
    address: str
    opened: datetime
    authorized: bool
    pending_payment: bool
    tx_cost: Decimal
    canceled: bool
    invalid_address: bool
    tx_id: str | None = None

    def __str__(self) -> str:
        return (
            f"Uuid: {self.payment_uuid} (Currency: {self.currency}, "
            f"Amount: {self.amount}, Address: {self.address}, "
            f"Pending: {self.pending_payment})"
        )

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Transaction":
        """API 응답에서 생성"""
        return cls(
            payment_uuid=data["PaymentUuid"],
            currency=data["Currency"],
            amount=to_decimal(data["Amount"]),
            address=data["Address"],
            opened=parse_api_timestamp(data["Opened"]),
            authorized=bool(data["Authorized"]),
            pending_payment=bool(data["PendingPayment"]),
            tx_cost=to_decimal(data["TxCost"]),
            canceled=bool(data["Canceled"]),
            invalid_address=bool(data["InvalidAddress"]),
            tx_id=data.get("TxId"),
        )


@dataclass(frozen=True)
class Balance:
    """잔고

    Attributes:
        currency: 코인 코드
        balance: 총 잔고
        available: 사용 가능 잔고
        pending: 입금 대기 잔고
        crypto_address: 입금 주소
    """

    currency: str
    balance: Decimal
    available: Decimal
    pending: Decimal
    crypto_address: str | None = None

    def __str__(self) -> str:
        return (
            f"Currency: {self.currency} (Balance: {self.balance}, "
            f"Available: {self.available}, Pending: {self.pending})"
        )

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Balance":
        """API 응답에서 생성"""
        return cls(
            currency=data["Currency"],
            balance=to_decimal(data["Balance"]),
            available=to_decimal(data["Available"]),
            pending=to_decimal(data["Pending"]),
            crypto_address=data.get("CryptoAddress"),
        )
