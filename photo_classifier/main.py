from __future__ import annotations

import argparse
from pathlib import Path
import sys

from loguru import logger

from photo_classifier.core.classifier import PhotoClassifier
from photo_classifier.core.errors import ClassificationError
from photo_classifier.infrastructure.logging import find_latest_log_file, init_logging
from photo_classifier.infrastructure.settings import DEFAULT_LOG_LEVEL, JsonSettings

BASE_DIR = Path(__file__).parent


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="photo-classifier",
        description="Rename photo records into per-city sequential names.",
    )
    parser.add_argument("input", nargs="?", default="-", help="input text file ('-' for stdin)")
    parser.add_argument("-o", "--output", help="write result to this file instead of stdout")
    parser.add_argument("--settings", help="path to a settings JSON file")
    parser.add_argument("--log-dir", help="directory for log files (overrides settings)")
    return parser


def _load_settings(parser: argparse.ArgumentParser, path: str | None) -> JsonSettings | None:
    if not path:
        default = BASE_DIR / "settings.json"
        if not default.exists():
            return None
        path = str(default)
    try:
        return JsonSettings(path)
    except (OSError, ValueError) as ex:
        parser.error(f"cannot load settings {path}: {ex}")
    return None


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _fail(log_dir: Path, message: str, *args) -> int:
    logger.error(message, *args)
    log_file = find_latest_log_file(str(log_dir))
    if log_file is not None:
        logger.warning("Details in {}", log_file)
    return 1


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    settings = _load_settings(parser, args.settings)
    log_dir = args.log_dir or (settings.log_dir if settings else None)
    log_path = init_logging(log_dir, settings.log_level if settings else DEFAULT_LOG_LEVEL)

    try:
        text = _read_input(args.input)
    except (OSError, UnicodeDecodeError) as ex:
        return _fail(log_path, "Cannot read input {}: {}", args.input, ex)

    try:
        result = PhotoClassifier().classify(text)
    except ClassificationError as ex:
        return _fail(log_path, "Classification failed for {}: {}", args.input, ex)

    if args.output:
        try:
            Path(args.output).write_text(result, encoding="utf-8")
        except OSError as ex:
            return _fail(log_path, "Cannot write output {}: {}", args.output, ex)
        logger.info("Wrote {} names to {}", result.count("\n"), args.output)
    else:
        sys.stdout.write(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
