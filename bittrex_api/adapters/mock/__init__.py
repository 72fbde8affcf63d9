"""
Mock 어댑터

테스트용 Mock 구현체 제공.
Protocol 준수하여 실제 구현체와 교체 가능.
"""

from bittrex_api.adapters.mock.exchange_client import MockBittrexRestClient, MockState

__all__ = [
    "MockBittrexRestClient",
    "MockState",
]
