"""
bittrex_api - Bittrex 거래소 REST API 클라이언트

사용 예시:
```python
async with BittrexRestClient.from_file(Path("config/secrets.yaml")) as client:
    markets = await client.get_markets()
```
"""

from bittrex_api.adapters.bittrex import (
    BittrexApiError,
    BittrexError,
    BittrexJsonError,
    BittrexRestClient,
    NoResultsError,
)
from bittrex_api.adapters.interfaces import IBittrexRestClient
from bittrex_api.core.config.loader import ClientConfig, Credentials
from bittrex_api.core.types import OrderBookType

__version__ = "0.1.0"

__all__ = [
    "BittrexRestClient",
    "IBittrexRestClient",
    "ClientConfig",
    "Credentials",
    "OrderBookType",
    "BittrexError",
    "BittrexApiError",
    "BittrexJsonError",
    "NoResultsError",
]
