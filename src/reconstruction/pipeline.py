"""Reconstruction pipeline — от JSON документа до свободного члена P(0).

Слой-обвязка вокруг точного ядра (src.core.math):
- Разбор документа (keys.n, keys.k, записи по числовым ключам)
- Выбор первых k записей по возрастанию числового значения ключа
- x = числовое значение ключа, y = decode(value, base)
- Интерполяция в нуле и форматирование результата

Ядро не логирует и не перехватывает ошибки; этот слой логирует ход
обработки и переводит нарушения формата документа в EnvelopeError.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final

from pydantic import ValidationError as PydanticValidationError

from src.core.contracts import validate_share_envelope
from src.core.domain.sample_point import SamplePoint
from src.core.domain.share_envelope import KEYS_FIELD, ShareEntry, ShareEnvelope
from src.core.math.base_decoding import decode, to_decimal, validate_base
from src.core.math.interpolation import interpolate
from src.core.math.rational import Rational

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

RESULT_PREFIX: Final[str] = "Constant term c = "
REDUCED_FRACTION_NOTE: Final[str] = "(reduced fraction)"

# Ключ записи: десятичное целое только из ASCII цифр
_ENTRY_KEY_PATTERN: Final[re.Pattern] = re.compile(r"[+-]?[0-9]+")


# =============================================================================
# ERRORS
# =============================================================================


class EnvelopeReason(str, Enum):
    """Причина отказа при разборе документа."""

    MISSING_KEYS = "missing_keys"
    INVALID_KEYS = "invalid_keys"
    INSUFFICIENT_ENTRIES = "insufficient_entries"
    INVALID_ENTRY_KEY = "invalid_entry_key"
    MISSING_ENTRY_FIELD = "missing_entry_field"
    INVALID_ENTRY_VALUE = "invalid_entry_value"


class EnvelopeError(ValueError):
    """Документ не соответствует ожидаемому формату.

    Attributes:
        reason: машиночитаемая причина (EnvelopeReason)
        entry_key: ключ записи, если ошибка относится к записи
    """

    def __init__(self, reason: EnvelopeReason, message: str, entry_key: str | None = None):
        self.reason = reason
        self.entry_key = entry_key
        super().__init__(message)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ReconstructionConfig:
    """Конфигурация pipeline."""

    # Проверять документ по JSON Schema до разбора
    validate_schema: bool = False


# =============================================================================
# ENVELOPE
# =============================================================================


def load_envelope(document: Any) -> ShareEnvelope:
    """Разбор сырого JSON документа.

    Raises:
        EnvelopeError: MISSING_KEYS если нет keys/n/k, INVALID_KEYS если
            n, k не целые или не выполнено 1 <= k <= n
    """
    if not isinstance(document, dict):
        raise EnvelopeError(
            EnvelopeReason.MISSING_KEYS,
            f"document must be a JSON object, got {type(document).__name__}",
        )

    keys = document.get(KEYS_FIELD)
    if not isinstance(keys, dict) or "n" not in keys or "k" not in keys:
        raise EnvelopeError(
            EnvelopeReason.MISSING_KEYS,
            'JSON must contain "keys": { "n":..., "k":... }',
        )

    try:
        envelope = ShareEnvelope.from_document(document)
    except PydanticValidationError as e:
        raise EnvelopeError(
            EnvelopeReason.INVALID_KEYS,
            f"Invalid keys.n or keys.k: {e.errors()[0]['msg']}",
        ) from e

    logger.debug(
        "envelope loaded: n=%d k=%d entries=%d",
        envelope.keys.n,
        envelope.keys.k,
        len(envelope.entries),
    )
    return envelope


def _entry_x(entry_key: str) -> int:
    """Абсцисса записи из ключа.

    Принимаются только ASCII цифры с необязательным знаком: int() пропустил бы
    цифры других алфавитов ("٣") и отказал бы на ключах длиннее 4300 цифр.
    """
    text = entry_key.strip()
    if _ENTRY_KEY_PATTERN.fullmatch(text) is None:
        raise EnvelopeError(
            EnvelopeReason.INVALID_ENTRY_KEY,
            f"Entry key {entry_key!r} is not an integer",
            entry_key=entry_key,
        )
    return decode(text, 10)


def sorted_entry_keys(envelope: ShareEnvelope) -> list[str]:
    """Ключи записей по возрастанию числового значения (не порядок вставки)."""
    return sorted(envelope.entries, key=_entry_x)


def parse_entry(entry_key: str, raw_entry: Any) -> ShareEntry:
    """Разбор одной записи {base, value}.

    Raises:
        EnvelopeError: MISSING_ENTRY_FIELD если нет base/value,
            INVALID_ENTRY_VALUE если value не строка
    """
    if not isinstance(raw_entry, dict) or "base" not in raw_entry or "value" not in raw_entry:
        raise EnvelopeError(
            EnvelopeReason.MISSING_ENTRY_FIELD,
            f"Entry {entry_key} missing base/value",
            entry_key=entry_key,
        )

    try:
        return ShareEntry(base=raw_entry["base"], value=raw_entry["value"])
    except PydanticValidationError as e:
        raise EnvelopeError(
            EnvelopeReason.INVALID_ENTRY_VALUE,
            f"Entry {entry_key}: value must be a string",
            entry_key=entry_key,
        ) from e


def select_points(envelope: ShareEnvelope) -> tuple[SamplePoint, ...]:
    """Выбор первых k записей и сборка набора точек.

    Порядок точек совпадает с порядком отсортированных ключей.
    Соответствие n фактическому числу записей не проверяется.

    Raises:
        EnvelopeError: при нехватке записей или невалидной записи
        InvalidBase: основание вне [2, 36]
        BaseDecodingError: ошибка декодирования value
    """
    k = envelope.keys.k

    entry_keys = sorted_entry_keys(envelope)
    if len(entry_keys) < k:
        raise EnvelopeError(
            EnvelopeReason.INSUFFICIENT_ENTRIES,
            f"Not enough root entries in JSON compared to k ({len(entry_keys)} < {k})",
        )

    points = []
    for entry_key in entry_keys[:k]:
        entry = parse_entry(entry_key, envelope.entries[entry_key])

        base = validate_base(entry.base)
        point = SamplePoint(x=_entry_x(entry_key), y=decode(entry.value, base))
        logger.debug("entry %s: base=%d", entry_key.strip(), base)
        points.append(point)

    return tuple(points)


# =============================================================================
# PIPELINE
# =============================================================================


def reconstruct_constant_term(
    document: Any,
    config: ReconstructionConfig | None = None,
) -> Rational:
    """Полный проход: документ → точки → P(0).

    Raises:
        jsonschema.ValidationError: если включена проверка схемы и она не пройдена
        EnvelopeError, BaseDecodingError, CoincidentXValues: см. select_points/interpolate
    """
    config = config or ReconstructionConfig()

    if config.validate_schema:
        validate_share_envelope(document)

    envelope = load_envelope(document)
    points = select_points(envelope)
    result = interpolate(points)

    logger.info(
        "reconstructed constant term from %d of %d points", len(points), envelope.keys.n
    )
    return result


def format_constant_term(result: Rational) -> str:
    """Строка результата: целое как есть, иначе 'num / den (reduced fraction)'."""
    if result.denominator == 1:
        return RESULT_PREFIX + to_decimal(result.numerator)
    return (
        f"{RESULT_PREFIX}{to_decimal(result.numerator)} / "
        f"{to_decimal(result.denominator)} {REDUCED_FRACTION_NOTE}"
    )
