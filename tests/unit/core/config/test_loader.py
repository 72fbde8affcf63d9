"""
core/config/loader.py 테스트

secrets.yaml 로드, 검증, 클라이언트 설정 생성 테스트
"""

from pathlib import Path

import pytest

from bittrex_api.core.config.loader import (
    ClientConfig,
    Credentials,
    SecretsLoadError,
    load_client_config,
    load_secrets,
)
from bittrex_api.core.constants import BittrexEndpoints, Defaults


class TestCredentials:
    """Credentials 데이터클래스 테스트"""

    def test_creation(self) -> None:
        """기본 생성"""
        credentials = Credentials(api_key="test_key", api_secret="test_secret")

        assert credentials.api_key == "test_key"
        assert credentials.api_secret == "test_secret"

    def test_frozen(self) -> None:
        """불변성 확인"""
        credentials = Credentials(api_key="key", api_secret="secret")

        with pytest.raises(AttributeError):
            credentials.api_key = "new_key"  # type: ignore

    def test_secret_not_in_repr(self) -> None:
        """repr에 시크릿 미노출"""
        credentials = Credentials(api_key="key", api_secret="very_secret_value")

        assert "very_secret_value" not in repr(credentials)
        assert "key" in repr(credentials)


class TestClientConfig:
    """ClientConfig 데이터클래스 테스트"""

    def test_defaults(self) -> None:
        """기본값"""
        config = ClientConfig()

        assert config.base_url == BittrexEndpoints.API_URL
        assert config.base_url == "https://bittrex.com/api/v1.1"
        assert config.timeout == Defaults.TIMEOUT_SEC
        assert config.http_proxy is None
        assert config.https_proxy is None

    def test_frozen(self) -> None:
        """불변성 확인"""
        config = ClientConfig()

        with pytest.raises(AttributeError):
            config.base_url = "new_url"  # type: ignore


class TestLoadSecrets:
    """load_secrets 함수 테스트"""

    def test_load(self, temp_secrets_file: Path) -> None:
        """정상 로드"""
        credentials = load_secrets(temp_secrets_file)

        assert credentials.api_key == "test_api_key_abcde"
        assert credentials.api_secret == "test_api_secret_fghij"

    def test_file_not_found(self, temp_dir: Path) -> None:
        """파일 없음"""
        non_existent = temp_dir / "nonexistent.yaml"

        with pytest.raises(SecretsLoadError, match="찾을 수 없습니다"):
            load_secrets(non_existent)

    def test_empty_file(self, temp_dir: Path) -> None:
        """빈 파일"""
        empty_file = temp_dir / "empty.yaml"
        empty_file.write_text("", encoding="utf-8")

        with pytest.raises(SecretsLoadError, match="비어 있습니다"):
            load_secrets(empty_file)

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        """잘못된 YAML 형식"""
        file = temp_dir / "invalid.yaml"
        file.write_text("invalid: yaml: content:", encoding="utf-8")

        with pytest.raises(SecretsLoadError, match="파싱 실패"):
            load_secrets(file)

    def test_top_level_not_mapping(self, temp_dir: Path) -> None:
        """최상위가 목록"""
        file = temp_dir / "list.yaml"
        file.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(SecretsLoadError, match="매핑"):
            load_secrets(file)

    def test_missing_api_key(self, temp_dir: Path) -> None:
        """api_key 누락"""
        file = temp_dir / "no_api_key.yaml"
        file.write_text('api_secret: "secret"\n', encoding="utf-8")

        with pytest.raises(SecretsLoadError, match="'api_key'가 없습니다"):
            load_secrets(file)

    def test_missing_api_secret(self, temp_secrets_file_missing_secret: Path) -> None:
        """api_secret 누락"""
        with pytest.raises(SecretsLoadError, match="'api_secret'가 없습니다"):
            load_secrets(temp_secrets_file_missing_secret)


class TestLoadClientConfig:
    """load_client_config 함수 테스트"""

    def test_defaults_without_section(self, temp_secrets_file: Path) -> None:
        """client 섹션 없으면 기본값"""
        config = load_client_config(temp_secrets_file)

        assert config == ClientConfig()

    def test_section_values(self, temp_secrets_file_with_client: Path) -> None:
        """client 섹션 값 반영"""
        config = load_client_config(temp_secrets_file_with_client)

        # 끝의 / 제거
        assert config.base_url == "http://127.0.0.1:8080/api/v1.1"
        assert config.timeout == 5.0
        assert config.http_proxy == "http://127.0.0.1:3128"
        # 빈 문자열은 None
        assert config.https_proxy is None

    def test_non_positive_timeout(self, temp_secrets_file_invalid_timeout: Path) -> None:
        """timeout 0 이하"""
        with pytest.raises(SecretsLoadError, match="0보다 커야"):
            load_client_config(temp_secrets_file_invalid_timeout)

    def test_non_numeric_timeout(self, temp_dir: Path) -> None:
        """숫자가 아닌 timeout"""
        file = temp_dir / "bad_timeout.yaml"
        file.write_text(
            'api_key: "k"\napi_secret: "s"\nclient:\n  timeout: "soon"\n',
            encoding="utf-8",
        )

        with pytest.raises(SecretsLoadError, match="유효하지 않은 timeout"):
            load_client_config(file)

    def test_section_not_mapping(self, temp_dir: Path) -> None:
        """client 섹션이 매핑이 아님"""
        file = temp_dir / "bad_client.yaml"
        file.write_text(
            'api_key: "k"\napi_secret: "s"\nclient: "nope"\n',
            encoding="utf-8",
        )

        with pytest.raises(SecretsLoadError, match="'client'는 매핑"):
            load_client_config(file)
