"""
어댑터 테스트 픽스처

Bittrex API 응답 샘플 및 공통 클라이언트 픽스처 제공.
"""

import copy
from typing import Any

import pytest
import pytest_asyncio

from bittrex_api.adapters.bittrex.rest_client import BittrexRestClient
from bittrex_api.adapters.mock.exchange_client import MockBittrexRestClient
from bittrex_api.core.config.loader import ClientConfig

FIXED_NONCE = 1500000000000000000


def envelope(result: Any, success: bool = True, message: str = "") -> dict[str, Any]:
    """응답 envelope 생성"""
    return {"success": success, "message": message, "result": result}


# -------------------------------------------------------------------------
# 레코드 샘플
# -------------------------------------------------------------------------

MARKET_BTC_LTC = {
    "MarketCurrency": "LTC",
    "BaseCurrency": "BTC",
    "MarketCurrencyLong": "Litecoin",
    "BaseCurrencyLong": "Bitcoin",
    "MinTradeSize": 0.01,
    "MarketName": "BTC-LTC",
    "IsActive": True,
    "Created": "2014-02-13T00:00:00",
}

MARKET_BTC_DOGE = {
    "MarketCurrency": "DOGE",
    "BaseCurrency": "BTC",
    "MarketCurrencyLong": "Dogecoin",
    "BaseCurrencyLong": "Bitcoin",
    "MinTradeSize": 100.0,
    "MarketName": "BTC-DOGE",
    "IsActive": True,
    "Created": "2014-02-13T00:00:00",
}

CURRENCY_BTC = {
    "Currency": "BTC",
    "CurrencyLong": "Bitcoin",
    "MinConfirmation": 2,
    "TxFee": 0.0002,
    "IsActive": True,
    "CoinType": "BITCOIN",
    "BaseAddress": None,
}

TICKER = {"Bid": 2.05670368, "Ask": 3.35579531, "Last": 3.35579531}

MARKET_SUMMARY_BTC_LTC = {
    "MarketName": "BTC-LTC",
    "High": 0.0135,
    "Low": 0.012,
    "Volume": 3833.97619253,
    "Last": 0.01349998,
    "BaseVolume": 47.03987026,
    "TimeStamp": "2014-07-09T07:22:16.72",
    "Bid": 0.01271001,
    "Ask": 0.012911,
    "OpenBuyOrders": 45,
    "OpenSellOrders": 45,
    "PrevDay": 0.01229501,
    "Created": "2014-02-13T00:00:00",
    "DisplayMarketName": None,
}

ORDER_BOOK = {
    "buy": [{"Quantity": 12.37, "Rate": 0.02525}],
    "sell": [
        {"Quantity": 32.55412402, "Rate": 0.0254},
        {"Quantity": 60.0, "Rate": 0.0255},
        {"Quantity": 60.0, "Rate": 0.02575},
        {"Quantity": 84.0, "Rate": 0.026},
    ],
}

TRADE = {
    "Id": 319435,
    "TimeStamp": "2014-07-09T03:21:20.08",
    "Quantity": 0.30802438,
    "Price": 0.012634,
    "Total": 0.00389158,
    "FillType": "FILL",
    "OrderType": "BUY",
}

OPEN_ORDER = {
    "Uuid": None,
    "OrderUuid": "09aa5bb6-8232-41aa-9b78-a5a1093e0211",
    "Exchange": "BTC-LTC",
    "OrderType": "LIMIT_SELL",
    "Quantity": 5.0,
    "QuantityRemaining": 5.0,
    "Limit": 2.0,
    "CommissionPaid": 0.0,
    "Price": 0.0,
    "PricePerUnit": None,
    "Opened": "2014-07-09T03:55:48.77",
    "Closed": None,
    "CancelInitiated": False,
    "ImmediateOrCancel": False,
    "IsConditional": False,
    "Condition": None,
    "ConditionTarget": None,
}

HISTORY_ORDER = {
    "OrderUuid": "17fd64d1-f4bd-4fb6-adb9-42ec68b8697d",
    "Exchange": "BTC-ZS",
    "TimeStamp": "2014-07-08T20:38:58.317",
    "OrderType": "LIMIT_SELL",
    "Limit": 0.0000295,
    "Quantity": 667.03644955,
    "QuantityRemaining": 0.0,
    "Commission": 0.00004921,
    "Price": 0.01968424,
    "PricePerUnit": 0.0000295,
    "IsConditional": False,
    "Condition": None,
    "ConditionTarget": None,
    "ImmediateOrCancel": False,
}

ORDER = {
    "AccountId": None,
    "OrderUuid": "0cb4c4e4-bdc7-4e13-8c13-430e587d2cc1",
    "Exchange": "BTC-SHLD",
    "Type": "LIMIT_BUY",
    "Quantity": 1000.0,
    "QuantityRemaining": 1000.0,
    "Limit": 0.00000001,
    "Reserved": 0.00001,
    "ReserveRemaining": 0.00001,
    "CommissionReserved": 0.00000002,
    "CommissionReserveRemaining": 0.00000002,
    "CommissionPaid": 0.0,
    "Price": 0.0,
    "PricePerUnit": None,
    "Opened": "2014-07-13T07:45:46.27",
    "Closed": None,
    "IsOpen": True,
    "Sentinel": "6c454604-22e2-4fb4-892e-179eede20972",
    "CancelInitiated": False,
    "ImmediateOrCancel": False,
    "IsConditional": False,
    "Condition": "NONE",
    "ConditionTarget": None,
}

TRANSACTION = {
    "PaymentUuid": "b52c7a5c-90c6-4c6e-835c-e16df12708b1",
    "Currency": "BTC",
    "Amount": 17.0,
    "Address": "1DeaaFBdbB5nrHj87x3NHS4onvw1GPNyAu",
    "Opened": "2014-07-09T04:24:47.217",
    "Authorized": True,
    "PendingPayment": False,
    "TxCost": 0.0002,
    "TxId": None,
    "Canceled": True,
    "InvalidAddress": False,
}

BALANCE_BTC = {
    "Currency": "BTC",
    "Balance": 14.21549076,
    "Available": 14.21549076,
    "Pending": 0.0,
    "CryptoAddress": "1Mrcdr6715hjda34pdXuLqXcju6qgwHA31",
    "Requested": False,
    "Uuid": None,
}

DEPOSIT_ADDRESS = {"Currency": "VTC", "Address": "Vy5SKeKGXUHKS2WVpJ76HYuKAu3URastUo"}

ORDER_UUID = {"uuid": "e606d53c-8d70-11e3-94b5-425861b86ab6"}


# -------------------------------------------------------------------------
# 클라이언트 픽스처
# -------------------------------------------------------------------------

@pytest.fixture
def client_config() -> ClientConfig:
    """테스트용 설정 (로컬 base_url)"""
    return ClientConfig(base_url="http://bittrex.test/api/v1.1", timeout=5.0)


@pytest_asyncio.fixture
async def rest_client(client_config: ClientConfig) -> BittrexRestClient:
    """고정 nonce를 쓰는 REST 클라이언트"""
    client = BittrexRestClient(
        api_key="KEY",
        api_secret="SECRET",
        config=client_config,
        nonce_source=lambda: FIXED_NONCE,
    )
    yield client
    await client.close()


@pytest.fixture
def mock_client() -> MockBittrexRestClient:
    """Mock REST 클라이언트 (준비된 응답 없음)"""
    return MockBittrexRestClient()


# -------------------------------------------------------------------------
# 응답 샘플 픽스처
# -------------------------------------------------------------------------

@pytest.fixture
def samples() -> dict[str, dict[str, Any]]:
    """레코드 샘플 (테스트마다 복사본)"""
    return copy.deepcopy({
        "market": MARKET_BTC_LTC,
        "market_doge": MARKET_BTC_DOGE,
        "currency": CURRENCY_BTC,
        "ticker": TICKER,
        "market_summary": MARKET_SUMMARY_BTC_LTC,
        "order_book": ORDER_BOOK,
        "trade": TRADE,
        "open_order": OPEN_ORDER,
        "history_order": HISTORY_ORDER,
        "order": ORDER,
        "transaction": TRANSACTION,
        "balance": BALANCE_BTC,
        "deposit_address": DEPOSIT_ADDRESS,
        "uuid": ORDER_UUID,
    })


@pytest.fixture
def make_envelope():
    """응답 envelope 생성 함수"""
    return envelope


@pytest.fixture
def fixed_nonce() -> int:
    """rest_client 픽스처가 사용하는 nonce"""
    return FIXED_NONCE
