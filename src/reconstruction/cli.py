"""CLI — восстановление свободного члена из JSON файла.

    python -m src.reconstruction input.json [-v] [--strict-schema]

Ошибки ядра и формата документа отображаются в коды выхода процесса
(ExitCode). Результат печатается в stdout, диагностика в stderr через logging.
"""

import argparse
import json
import logging
import sys
from enum import IntEnum
from pathlib import Path
from typing import Optional, Sequence

from src.core.contracts import ValidationError as SchemaValidationError
from src.core.math.base_decoding import BaseDecodingError, InvalidBase
from src.core.math.interpolation import CoincidentXValues
from src.core.math.rational import DivisionByZero
from src.reconstruction.pipeline import (
    EnvelopeError,
    EnvelopeReason,
    ReconstructionConfig,
    format_constant_term,
    reconstruct_constant_term,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class ExitCode(IntEnum):
    """Коды выхода процесса."""

    OK = 0
    USAGE = 2
    UNREADABLE_INPUT = 3
    MISSING_KEYS = 4
    INVALID_KEYS = 5
    INSUFFICIENT_ENTRIES = 6
    MALFORMED_ENTRY = 7
    INVALID_BASE = 8
    DECODE_FAILURE = 9
    INTERPOLATION_FAILURE = 10
    SCHEMA_VIOLATION = 11


_ENVELOPE_EXIT_CODES = {
    EnvelopeReason.MISSING_KEYS: ExitCode.MISSING_KEYS,
    EnvelopeReason.INVALID_KEYS: ExitCode.INVALID_KEYS,
    EnvelopeReason.INSUFFICIENT_ENTRIES: ExitCode.INSUFFICIENT_ENTRIES,
    EnvelopeReason.INVALID_ENTRY_KEY: ExitCode.MALFORMED_ENTRY,
    EnvelopeReason.MISSING_ENTRY_FIELD: ExitCode.MALFORMED_ENTRY,
    EnvelopeReason.INVALID_ENTRY_VALUE: ExitCode.DECODE_FAILURE,
}


def exit_code_for(error: Exception) -> ExitCode:
    """Код выхода для исключения из pipeline.

    Неизвестные исключения не отображаются: вызывающий код их пробрасывает.
    """
    if isinstance(error, EnvelopeError):
        return _ENVELOPE_EXIT_CODES[error.reason]
    # InvalidBase: подкласс BaseDecodingError
    if isinstance(error, InvalidBase):
        return ExitCode.INVALID_BASE
    if isinstance(error, BaseDecodingError):
        return ExitCode.DECODE_FAILURE
    if isinstance(error, (CoincidentXValues, DivisionByZero)):
        return ExitCode.INTERPOLATION_FAILURE
    if isinstance(error, SchemaValidationError):
        return ExitCode.SCHEMA_VIOLATION
    if isinstance(error, (OSError, json.JSONDecodeError, UnicodeDecodeError)):
        return ExitCode.UNREADABLE_INPUT
    raise TypeError(f"no exit code for {type(error).__name__}") from error


def configure_logging(verbose: bool = False) -> None:
    """Логирование в stderr; -v включает DEBUG."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reconstruct",
        description="Compute the constant term P(0) from the first k base-encoded points",
    )
    parser.add_argument("input", type=Path, help="JSON file with keys and sample entries")
    parser.add_argument(
        "--strict-schema",
        action="store_true",
        help="validate the document against the share_envelope JSON Schema first",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def read_document(path: Path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Точка входа CLI.

    Returns:
        Код выхода процесса (ExitCode)
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return ExitCode.OK if e.code == 0 else ExitCode.USAGE

    configure_logging(args.verbose)
    config = ReconstructionConfig(validate_schema=args.strict_schema)

    try:
        document = read_document(args.input)
        result = reconstruct_constant_term(document, config)
    except (
        OSError,
        json.JSONDecodeError,
        UnicodeDecodeError,
        SchemaValidationError,
        EnvelopeError,
        BaseDecodingError,
        CoincidentXValues,
        DivisionByZero,
    ) as e:
        code = exit_code_for(e)
        logger.error("%s: %s", code.name.lower(), e)
        return code

    print(format_constant_term(result))
    return ExitCode.OK


if __name__ == "__main__":
    sys.exit(main())
