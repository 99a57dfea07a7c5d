"""
Contract Validation Module

Модуль для валидации входных JSON документов по JSON Schema контрактам.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    ShareEnvelopeValidator,
    ValidationError,
    get_schema_loader,
    validate_share_envelope,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ShareEnvelopeValidator",
    # Errors
    "ValidationError",
    # Functions
    "get_schema_loader",
    "validate_share_envelope",
]
