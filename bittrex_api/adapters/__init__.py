"""
어댑터 레이어

Bittrex REST API 연동을 담당.
Protocol 기반 인터페이스로 Mock 교체 가능.
"""

from bittrex_api.adapters.interfaces import IBittrexRestClient

__all__ = [
    "IBittrexRestClient",
]
