"""
Bittrex 엔드포인트 선언 테이블

엔드포인트마다 경로, 쿼리 파라미터, public/private, 응답 형태, 기대 개수,
레코드 타입을 한 줄로 선언. BittrexRestClient는 이 테이블 하나로 모든 호출을 처리.
"""

from dataclasses import dataclass

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
    PublicOrder,
    Ticker,
    Trade,
    Transaction,
    Uuid,
)
from bittrex_api.adapters.bittrex.normalizer import RecordParser
from bittrex_api.core.types import Cardinality, ExpectedShape


@dataclass(frozen=True)
class Endpoint:
    """엔드포인트 선언

    Attributes:
        name: 테이블 키
        path: API 경로 (base_url 뒤에 붙음)
        private: 서명 필요 여부
        shape: result 형태
        cardinality: 기대 개수
        model: 레코드 타입 (from_api 보유, 결과를 쓰지 않으면 None)
        params: 필수 쿼리 파라미터 (전송 순서)
        optional_params: 선택 쿼리 파라미터 (값이 None이면 생략)
    """

    name: str
    path: str
    private: bool
    shape: ExpectedShape
    cardinality: Cardinality
    model: type | None = None
    params: tuple[str, ...] = ()
    optional_params: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.shape is ExpectedShape.OPTIONAL_SINGLE and self.cardinality is Cardinality.MANY:
            raise ValueError(f"{self.name}: 단일 객체 응답은 MANY로 선언할 수 없습니다")
        if self.model is None and self.cardinality is not Cardinality.NONE:
            raise ValueError(f"{self.name}: 결과를 반환하는 엔드포인트는 model이 필요합니다")

    @property
    def parser(self) -> RecordParser | None:
        """레코드 변환 함수"""
        return self.model.from_api if self.model is not None else None

    def build_params(self, values: dict[str, str | None]) -> dict[str, str]:
        """선언 순서대로 쿼리 파라미터 구성

        Args:
            values: 파라미터 이름 -> 문자열 값

        Returns:
            전송할 쿼리 파라미터 (선언 순서 유지)

        Raises:
            ValueError: 필수 파라미터 누락 또는 알 수 없는 파라미터
        """
        unknown = set(values) - set(self.params) - set(self.optional_params)
        if unknown:
            raise ValueError(f"{self.name}: 알 수 없는 파라미터 {sorted(unknown)}")

        query: dict[str, str] = {}
        for key in self.params:
            value = values.get(key)
            if value is None:
                raise ValueError(f"{self.name}: 필수 파라미터 '{key}' 누락")
            query[key] = value

        for key in self.optional_params:
            value = values.get(key)
            if value is not None:
                query[key] = value

        return query


_LIST = ExpectedShape.OPTIONAL_LIST
_SINGLE = ExpectedShape.OPTIONAL_SINGLE


ENDPOINT_LIST: tuple[Endpoint, ...] = (
    # -------------------------------------------------------------------------
    # public
    # -------------------------------------------------------------------------
    Endpoint("get_markets", "/public/getmarkets", False, _LIST, Cardinality.MANY, Market),
    Endpoint("get_currencies", "/public/getcurrencies", False, _LIST, Cardinality.MANY, Currency),
    Endpoint(
        "get_ticker", "/public/getticker", False, _SINGLE, Cardinality.SINGLE, Ticker,
        params=("market",),
    ),
    Endpoint(
        "get_market_summaries", "/public/getmarketsummaries", False, _LIST,
        Cardinality.MANY, MarketSummary,
    ),
    # 단건이지만 1개짜리 배열로 응답
    Endpoint(
        "get_market_summary", "/public/getmarketsummary", False, ExpectedShape.LEGACY_LIST,
        Cardinality.SINGLE, MarketSummary,
        params=("market",),
    ),
    Endpoint(
        "get_order_book", "/public/getorderbook", False, _SINGLE, Cardinality.SINGLE, OrderBook,
        params=("market", "type"),
    ),
    # type=buy/sell이면 result가 호가 배열
    Endpoint(
        "get_order_book_side", "/public/getorderbook", False, _LIST, Cardinality.MANY, PublicOrder,
        params=("market", "type"),
    ),
    Endpoint(
        "get_market_history", "/public/getmarkethistory", False, _LIST, Cardinality.MANY, Trade,
        params=("market",),
    ),
    # -------------------------------------------------------------------------
    # market (private)
    # -------------------------------------------------------------------------
    Endpoint(
        "buy_limit", "/market/buylimit", True, _SINGLE, Cardinality.SINGLE, Uuid,
        params=("market", "quantity", "rate"),
    ),
    Endpoint(
        "sell_limit", "/market/selllimit", True, _SINGLE, Cardinality.SINGLE, Uuid,
        params=("market", "quantity", "rate"),
    ),
    Endpoint(
        "cancel_order", "/market/cancel", True, _SINGLE, Cardinality.NONE,
        params=("uuid",),
    ),
    Endpoint(
        "get_open_orders", "/market/getopenorders", True, _LIST, Cardinality.MANY, OpenOrder,
        optional_params=("market",),
    ),
    # -------------------------------------------------------------------------
    # account (private)
    # -------------------------------------------------------------------------
    Endpoint("get_balances", "/account/getbalances", True, _LIST, Cardinality.MANY, Balance),
    Endpoint(
        "get_balance", "/account/getbalance", True, _SINGLE, Cardinality.SINGLE, Balance,
        params=("currency",),
    ),
    Endpoint(
        "get_deposit_address", "/account/getdepositaddress", True, _SINGLE,
        Cardinality.SINGLE, Address,
        params=("currency",),
    ),
    Endpoint(
        "withdraw", "/account/withdraw", True, _SINGLE, Cardinality.SINGLE, Uuid,
        params=("currency", "quantity", "address"),
        optional_params=("paymentid",),
    ),
    Endpoint(
        "get_order", "/account/getorder", True, _SINGLE, Cardinality.SINGLE, Order,
        params=("uuid",),
    ),
    Endpoint(
        "get_order_history", "/account/getorderhistory", True, _LIST, Cardinality.MANY,
        HistoryOrder,
        optional_params=("market",),
    ),
    Endpoint(
        "get_withdrawal_history", "/account/getwithdrawalhistory", True, _LIST,
        Cardinality.MANY, Transaction,
        optional_params=("currency",),
    ),
    Endpoint(
        "get_deposit_history", "/account/getdeposithistory", True, _LIST, Cardinality.MANY,
        Transaction,
        optional_params=("currency",),
    ),
)

ENDPOINTS: dict[str, Endpoint] = {endpoint.name: endpoint for endpoint in ENDPOINT_LIST}


def get_endpoint(name: str) -> Endpoint:
    """이름으로 엔드포인트 조회

    Raises:
        KeyError: 선언되지 않은 엔드포인트
    """
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise KeyError(f"선언되지 않은 엔드포인트: {name}") from None
