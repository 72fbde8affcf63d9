"""
Bittrex 어댑터 패키지

REST API 클라이언트, 요청 서명, 응답 정규화, 응답 모델 제공.
"""

from bittrex_api.adapters.bittrex.rest_client import BittrexRestClient
from bittrex_api.adapters.bittrex.errors import (
    BittrexError,
    BittrexApiError,
    BittrexJsonError,
    NoResultsError,
)
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

__all__ = [
    "BittrexRestClient",
    # Errors
    "BittrexError",
    "BittrexApiError",
    "BittrexJsonError",
    "NoResultsError",
    # Models
    "Address",
    "Balance",
    "Currency",
    "HistoryOrder",
    "Market",
    "MarketSummary",
    "OpenOrder",
    "Order",
    "OrderBook",
    "PublicOrder",
    "Ticker",
    "Trade",
    "Transaction",
    "Uuid",
]
