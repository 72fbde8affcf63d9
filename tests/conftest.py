"""
pytest 공통 fixture 정의
"""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_secrets_file(temp_dir: Path) -> Path:
    """테스트용 secrets.yaml 파일 생성 (client 섹션 없음)"""
    secrets_content = """# 테스트용 secrets.yaml
api_key: "test_api_key_abcde"
api_secret: "test_api_secret_fghij"
"""
    secrets_path = temp_dir / "secrets.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def temp_secrets_file_with_client(temp_dir: Path) -> Path:
    """client 섹션이 포함된 secrets.yaml 파일 생성"""
    secrets_content = """api_key: "test_api_key_abcde"
api_secret: "test_api_secret_fghij"

client:
  base_url: "http://127.0.0.1:8080/api/v1.1/"
  timeout: 5
  http_proxy: "http://127.0.0.1:3128"
  https_proxy: ""
"""
    secrets_path = temp_dir / "secrets_client.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def temp_secrets_file_missing_secret(temp_dir: Path) -> Path:
    """api_secret이 빠진 secrets.yaml 파일 생성"""
    secrets_content = """api_key: "test_api_key_abcde"
"""
    secrets_path = temp_dir / "secrets_missing.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def temp_secrets_file_invalid_timeout(temp_dir: Path) -> Path:
    """timeout이 0인 secrets.yaml 파일 생성"""
    secrets_content = """api_key: "key"
api_secret: "secret"

client:
  timeout: 0
"""
    secrets_path = temp_dir / "secrets_timeout.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path
