#!/usr/bin/env python3
"""
Интерфейс командной строки для Russian Analyser

Команды:
1. analyze - анализ текста и вывод итоговых токенов
2. stopwords - вывод стандартного списка стоп-слов
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .analyzer import RussianAnalyzer, get_default_stop_set
from .config import Config
from .exceptions import AnalysisError
from .factory import create_analyzer

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="russian_analyser",
        description="Анализ русского текста: токенизация, стоп-слова, стемминг",
    )
    parser.add_argument("--config", help="Путь к config.yaml")
    subparsers = parser.add_subparsers(dest="command")

    analyze = subparsers.add_parser("analyze", help="Проанализировать текст")
    analyze.add_argument("text", nargs="?", help="Текст для анализа")
    analyze.add_argument("--file", help="Прочитать текст из файла (UTF-8)")
    analyze.add_argument("--field", default="text", help="Имя поля")
    analyze.add_argument("--stopwords", help="Пользовательский список стоп-слов")
    analyze.add_argument("--stopwords-format", choices=["snowball", "plain"], default="snowball")
    analyze.add_argument("--exclude", nargs="*", default=[], metavar="WORD",
                         help="Слова, которые не нужно стеммировать")
    analyze.add_argument("--json", action="store_true", help="Вывести токены в JSON")
    # Значение подкоманды перекрывает общий --config, если задано
    analyze.add_argument("--config", default=argparse.SUPPRESS, help="Путь к config.yaml")

    subparsers.add_parser("stopwords", help="Показать стандартные стоп-слова")
    return parser


def _create_analyzer(args, cfg: Config) -> RussianAnalyzer:
    if not args.stopwords and not args.exclude:
        return create_analyzer(cfg)
    # Параметры командной строки важнее config.yaml
    if args.stopwords:
        cfg.config_data['analysis']['stopwords'].update({
            'file': args.stopwords,
            'format': args.stopwords_format,
            'fallback_to_default': False,
        })
    if args.exclude:
        cfg.config_data['analysis']['stem_exclusion'] = cfg.get_stem_exclusion() + list(args.exclude)
    return create_analyzer(cfg)


def run_analyze(args, cfg: Config) -> int:
    """Анализирует текст и печатает токены"""
    analyzer = _create_analyzer(args, cfg)
    if args.file:
        source = open(args.file, "r", encoding="utf-8")
    elif args.text is not None:
        source = args.text
    else:
        source = sys.stdin.read()

    with analyzer.analyze(args.field, source) as stream:
        tokens = list(stream)

    if args.json:
        print(json.dumps([t.to_dict() for t in tokens], ensure_ascii=False, indent=2))
    else:
        for t in tokens:
            marker = " [keyword]" if t.is_keyword else ""
            print(f"{t.text}\t{t.start_offset}-{t.end_offset}\t+{t.position_increment}{marker}")
    logger.debug(f"Выдано токенов: {len(tokens)}")
    return 0


def run_stopwords() -> int:
    """Печатает стандартные стоп-слова по алфавиту"""
    for word in sorted(get_default_stop_set()):
        print(word)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 2

    cfg = Config(config_path=args.config)
    try:
        if args.command == "analyze":
            return run_analyze(args, cfg)
        return run_stopwords()
    except AnalysisError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"❌ Ошибка чтения входа: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
