import os
import sys
from pathlib import Path

import pytest

# В тестах явно добавляем путь к src, чтобы импортировать пакет без установки
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def fake_stemmer():
    """Детерминированный стеммер для проверки стадии стемминга."""
    from .utils.stream_helpers import FakeStemmer

    return FakeStemmer()


@pytest.fixture(scope="session")
def sample_texts():
    """Наборы русских текстов для тестирования."""
    from .fixtures.sample_texts import SAMPLE_SIMPLE_TEXT, SAMPLE_COMPLEX_TEXT, SAMPLE_MIXED_TEXT

    return {
        "simple": SAMPLE_SIMPLE_TEXT,
        "complex": SAMPLE_COMPLEX_TEXT,
        "mixed": SAMPLE_MIXED_TEXT,
    }


@pytest.fixture
def temp_directory(tmp_path: Path) -> Path:
    """Временная директория для тестов.

    Возвращает уникальную директорию для каждого теста.
    """
    return tmp_path


@pytest.fixture(autouse=True)
def clean_analyser_env(monkeypatch):
    """Убирает переменные RUSSIAN_ANALYSER_* пользователя, чтобы тесты не зависели от окружения."""
    for key in list(os.environ):
        if key.startswith("RUSSIAN_ANALYSER_"):
            monkeypatch.delenv(key, raising=False)


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")
    config.addinivalue_line("markers", "performance: тесты производительности")
