"""Reconstruction — обвязка вокруг точного ядра интерполяции.

- Разбор JSON документа и выбор первых k точек
- Форматирование результата
- CLI с отображением ошибок в коды выхода
"""

from .pipeline import (
    EnvelopeError,
    EnvelopeReason,
    ReconstructionConfig,
    format_constant_term,
    load_envelope,
    reconstruct_constant_term,
    select_points,
)

__all__ = [
    "EnvelopeError",
    "EnvelopeReason",
    "ReconstructionConfig",
    "format_constant_term",
    "load_envelope",
    "reconstruct_constant_term",
    "select_points",
]
