"""
Core Package - Compliance Scoring Engine
compliance_engine/core/__init__.py

Core infrastructure: exceptions, logging.
"""

from compliance_engine.core.exceptions import (
    EntityNotFoundException,
    InvalidConfigurationException,
    ScoringEngineException,
)
from compliance_engine.core.logging_config import configure_logging

__all__ = [
    # Exceptions
    "EntityNotFoundException",
    "InvalidConfigurationException",
    "ScoringEngineException",
    # Logging
    "configure_logging",
]
