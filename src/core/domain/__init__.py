"""
Domain models and value objects.

Contains SamplePoint and the ShareEnvelope document models.
"""

from src.core.domain.sample_point import PointSet, SamplePoint, to_point_set
from src.core.domain.share_envelope import (
    KEYS_FIELD,
    EnvelopeKeys,
    ShareEntry,
    ShareEnvelope,
)

__all__ = [
    # Sample points
    "PointSet",
    "SamplePoint",
    "to_point_set",
    # Envelope
    "KEYS_FIELD",
    "EnvelopeKeys",
    "ShareEntry",
    "ShareEnvelope",
]
