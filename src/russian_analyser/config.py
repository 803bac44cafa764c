"""
Модуль для работы с конфигурацией проекта

Функции:
- Загрузка config.yaml (+ профили: config.prod.yaml, config.test.yaml)
- ENV-переопределения (префикс RUSSIAN_ANALYSER_, вложенность через __)
- Валидация параметров анализа
- Настройка логирования
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = 'RUSSIAN_ANALYSER_'
ENV_PROFILE = 'RUSSIAN_ANALYSER_ENV'

DEFAULT_CONFIG: Dict[str, Any] = {
    'analysis': {
        'language': 'russian',
        'version': 'latest',
        # standard | spacy
        'tokenizer': 'standard',
        'max_token_length': 255,
        'enable_position_increments': True,
        'stopwords': {
            # Путь к пользовательскому списку; null - стандартный список
            'file': None,
            # snowball | plain
            'format': 'snowball',
            'ignore_case': True,
            # При ошибке чтения пользовательского списка использовать стандартный
            'fallback_to_default': True,
        },
        'stem_exclusion': [],
        'stem_exclusion_file': None,
    },
    'logging': {
        'level': "INFO",
        'file_level': "DEBUG",
        'format': "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        'log_to_file': False,
        'log_file': "logs/russian_analyser.log",
    },
}


class Config:
    """Класс для работы с конфигурацией проекта"""

    def __init__(self, config_path: Optional[str] = None, configure_logging: bool = True):
        """
        Инициализация конфигурации

        Args:
            config_path: Путь к файлу конфигурации
            configure_logging: Настраивать ли корневой логгер по конфигу
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            # Ищем config.yaml в текущей и родительских директориях
            current_dir = Path.cwd()
            config_path = current_dir / "config.yaml"
            while not config_path.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                config_path = current_dir / "config.yaml"
            self.config_path = config_path

        self.config_data: Dict[str, Any] = {}

        self._load_config()
        # .env только дополняет окружение, явные переменные важнее
        load_dotenv(override=False)
        self._apply_env_overrides()
        self._validate()
        if configure_logging:
            self._configure_logging_if_needed()

    def _resolve_config_path(self) -> Path:
        env = os.getenv(ENV_PROFILE, '').lower().strip()
        root = self.config_path.parent
        if env == 'production':
            candidate = root / 'config.prod.yaml'
        elif env == 'testing':
            candidate = root / 'config.test.yaml'
        else:
            return self.config_path
        if candidate.exists():
            return candidate
        # Фолбэк на исходный путь
        return self.config_path

    def _load_config(self) -> None:
        """Загружает конфигурацию из YAML файла поверх значений по умолчанию"""
        self.config_data = copy.deepcopy(DEFAULT_CONFIG)
        self.config_path = self._resolve_config_path()
        if not self.config_path.exists():
            logger.debug(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
            return
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Ошибка загрузки конфигурации {self.config_path}: {e}")
            return
        if not isinstance(loaded, dict):
            logger.error(f"Конфигурация {self.config_path} должна быть словарём, получено {type(loaded).__name__}")
            return
        self._merge(self.config_data, loaded)
        logger.info(f"Конфигурация загружена: {self.config_path}")

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (RUSSIAN_ANALYSER_*)."""
        for key, val in os.environ.items():
            if not key.startswith(ENV_PREFIX) or key == ENV_PROFILE:
                continue
            # Вложенность разделяется двойным подчёркиванием
            dotted = key[len(ENV_PREFIX):].replace('__', '.').lower()
            parsed: Any = val
            if val.lower() in ('true', 'false'):
                parsed = (val.lower() == 'true')
            else:
                try:
                    parsed = float(val) if '.' in val else int(val)
                except ValueError:
                    parsed = val
            self._set_nested(self.config_data, dotted, parsed)
        if os.getenv(ENV_PROFILE):
            logger.info(f"Активирован профиль: {os.getenv(ENV_PROFILE)}")

    def _validate(self) -> None:
        """Проверяет диапазоны значений."""
        try:
            max_len = int(self.get('analysis.max_token_length', 255))
        except (TypeError, ValueError):
            logger.warning("max_token_length не является числом - используется 255")
            max_len = 255
        if max_len < 1:
            logger.warning("max_token_length < 1 - принудительно установлено в 1")
            max_len = 1
        self._set_nested(self.config_data, 'analysis.max_token_length', max_len)

    def _configure_logging_if_needed(self, force: bool = False) -> None:
        """Инициализирует базовое логирование по config (идемпотентно)."""
        root = logging.getLogger()

        console_level_name = str(self.get_console_logging_level()).upper()
        file_level_name = str(self.get_file_logging_level()).upper()
        console_level = getattr(logging, console_level_name, logging.INFO)
        file_level = getattr(logging, file_level_name, logging.DEBUG)
        desired_fmt = self.get_logging_format()
        desired_file = self.get_logging_file() if self.is_logging_to_file_enabled() else None
        desired_state = (console_level_name, file_level_name, desired_fmt, desired_file)

        if getattr(root, "_russian_analyser_logging", None) == desired_state and not force:
            return

        handlers: List[logging.Handler] = []
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)

        if desired_file:
            log_file = Path(desired_file)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setLevel(file_level)
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)
            except OSError as e:
                logger.warning(f"Не удалось открыть файл лога {log_file}: {e}")

        root_level = min(console_level, file_level) if len(handlers) > 1 else console_level
        logging.basicConfig(level=root_level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_russian_analyser_logging", desired_state)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение конфигурации по ключу

        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию

        Returns:
            Значение параметра или default
        """
        try:
            value = self.config_data
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get_analysis_config(self) -> Dict[str, Any]:
        """Получает конфигурацию анализа"""
        return self.config_data.get('analysis', {})

    def get_language(self) -> str:
        return str(self.get('analysis.language', 'russian')).lower()

    def get_version(self) -> str:
        """Получает тег совместимости"""
        return str(self.get('analysis.version', 'latest'))

    def get_tokenizer(self) -> str:
        return str(self.get('analysis.tokenizer', 'standard')).lower()

    def get_max_token_length(self) -> int:
        return self.get('analysis.max_token_length', 255)

    def is_position_increments_enabled(self) -> bool:
        return bool(self.get('analysis.enable_position_increments', True))

    def get_stopwords_file(self) -> Optional[str]:
        """Путь к пользовательскому списку стоп-слов или None"""
        return self.get('analysis.stopwords.file') or None

    def get_stopwords_format(self) -> str:
        return str(self.get('analysis.stopwords.format', 'snowball')).lower()

    def is_stopwords_ignore_case(self) -> bool:
        return bool(self.get('analysis.stopwords.ignore_case', True))

    def is_stopwords_fallback_enabled(self) -> bool:
        return bool(self.get('analysis.stopwords.fallback_to_default', True))

    def get_stem_exclusion(self) -> List[str]:
        """Слова, исключённые из стемминга (список или строка через запятую)"""
        value = self.get('analysis.stem_exclusion', []) or []
        if isinstance(value, str):
            value = value.split(',')
        return [str(w).strip() for w in value if str(w).strip()]

    def get_stem_exclusion_file(self) -> Optional[str]:
        return self.get('analysis.stem_exclusion_file') or None

    def get_console_logging_level(self) -> str:
        """Получает уровень логирования для консоли"""
        return self.get('logging.level', "INFO")

    def get_file_logging_level(self) -> str:
        """Получает уровень логирования для файла"""
        return self.get('logging.file_level', "DEBUG")

    def get_logging_format(self) -> str:
        return self.get('logging.format', DEFAULT_CONFIG['logging']['format'])

    def get_logging_file(self) -> str:
        return self.get('logging.log_file', DEFAULT_CONFIG['logging']['log_file'])

    def is_logging_to_file_enabled(self) -> bool:
        """Проверяет, включено ли логирование в файл"""
        return bool(self.get('logging.log_to_file', False))


_config: Optional[Config] = None


def get_config() -> Config:
    """Возвращает общую конфигурацию процесса (создаётся при первом обращении)."""
    global _config
    if _config is None:
        _config = Config()
    return _config
