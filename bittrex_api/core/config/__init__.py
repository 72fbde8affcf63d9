"""
설정 패키지

secrets.yaml 로드 및 클라이언트 설정
"""

from bittrex_api.core.config.loader import (
    ClientConfig,
    Credentials,
    SecretsLoadError,
    load_client_config,
    load_secrets,
)

__all__ = [
    "ClientConfig",
    "Credentials",
    "SecretsLoadError",
    "load_client_config",
    "load_secrets",
]
