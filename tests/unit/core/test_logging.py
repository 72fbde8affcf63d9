"""
core/logging.py 테스트
"""

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

import pytest

from bittrex_api.core.constants import Paths
from bittrex_api.core.logging import (
    LOG_FILE_BACKUP_COUNT,
    NOISY_LOGGERS,
    get_log_file_path,
    setup_logging,
)


@pytest.fixture
def restore_root_logger():
    """루트 로거 핸들러/레벨 복원"""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    saved_noisy = {name: logging.getLogger(name).level for name in NOISY_LOGGERS}

    yield root

    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)
    for name, level in saved_noisy.items():
        logging.getLogger(name).setLevel(level)


class TestGetLogFilePath:
    """get_log_file_path 테스트"""

    def test_default_dir(self) -> None:
        """기본 디렉토리"""
        assert get_log_file_path("bittrex") == Paths.LOGS_DIR / "bittrex.log"

    def test_custom_dir(self, temp_dir: Path) -> None:
        """디렉토리 지정"""
        assert get_log_file_path("bittrex", temp_dir) == temp_dir / "bittrex.log"


class TestSetupLogging:
    """setup_logging 테스트"""

    def test_handlers(self, temp_dir: Path, restore_root_logger: logging.Logger) -> None:
        """콘솔 + daily 파일 핸들러"""
        log_dir = temp_dir / "logs"

        root = setup_logging("bittrex", log_dir=log_dir)

        assert root is restore_root_logger
        assert len(root.handlers) == 2

        file_handlers = [h for h in root.handlers if isinstance(h, TimedRotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].backupCount == LOG_FILE_BACKUP_COUNT
        assert (log_dir / "bittrex.log").exists()

    def test_repeated_setup_no_duplicate_handlers(
        self,
        temp_dir: Path,
        restore_root_logger: logging.Logger,
    ) -> None:
        """재호출 시 핸들러 중복 없음"""
        setup_logging("bittrex", log_dir=temp_dir)
        root = setup_logging("bittrex", log_dir=temp_dir)

        assert len(root.handlers) == 2

    def test_noisy_loggers_lowered(
        self,
        temp_dir: Path,
        restore_root_logger: logging.Logger,
    ) -> None:
        """httpx 등은 WARNING"""
        setup_logging("bittrex", log_dir=temp_dir)

        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_writes_to_file(self, temp_dir: Path, restore_root_logger: logging.Logger) -> None:
        """파일에 기록"""
        setup_logging("bittrex", log_dir=temp_dir)

        logging.getLogger("bittrex_api.test").info("hello file")
        for handler in restore_root_logger.handlers:
            handler.flush()

        content = (temp_dir / "bittrex.log").read_text(encoding="utf-8")
        assert "hello file" in content
        assert "| INFO     | bittrex_api.test |" in content
