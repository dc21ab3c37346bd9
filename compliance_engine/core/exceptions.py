"""
Custom Exceptions - Compliance Scoring Engine
compliance_engine/core/exceptions.py

The engine raises exactly two error kinds: a referenced record is missing,
or a template's weight configuration is malformed.
"""

from decimal import Decimal
from typing import Union


class ScoringEngineException(Exception):
    """Base exception for scoring and matching operations."""

    pass


class EntityNotFoundException(ScoringEngineException):
    """Referenced answer, section, template, assessment or priorities record does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with ID {entity_id} not found")


class InvalidConfigurationException(ScoringEngineException):
    """Weights of a section or template do not sum to 1.0."""

    def __init__(
        self,
        context: str,
        total: Union[Decimal, float],
        tolerance: Union[Decimal, float],
    ):
        self.context = context
        self.total = Decimal(str(total))
        self.tolerance = Decimal(str(tolerance))
        super().__init__(
            f"{context} sum to {self.total:.4f}, must equal 1.0 (±{self.tolerance})"
        )
