"""
Heuristic Evidence Classifier
compliance_engine/scoring/evidence_classifier.py

Assigns an evidence tier to a document from its text and filename when no
upstream classification is available.

Checks run strongest tier first:
  TIER_2: system-generated markers (timestamps, "generated on:", CSV rows,
          .csv/.json/.xml/.log files)                       confidence 0.70
  TIER_1: formal policy markers ("policy document", "version N",
          "approved by", "effective date", "procedure")     confidence 0.60
  TIER_0: everything else (self-declared)                   confidence 0.50

Usage:
    result = classify_document("Generated on: 2024-01-05 ...", "export.txt")
    # result.tier = EvidenceTier.TIER_2
"""

import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Pattern

import structlog

from compliance_engine.models.enumerations import EvidenceTier

logger = structlog.get_logger(__name__)

MAX_CONTENT_LENGTH = 5000

# ---------------------------------------------------------------------------
# Marker patterns
# ---------------------------------------------------------------------------

TIER_2_PATTERNS: List[Pattern] = [
    re.compile(r"generated on:", re.IGNORECASE),
    re.compile(r"timestamp:", re.IGNORECASE),
    re.compile(r"system id:", re.IGNORECASE),
    re.compile(r'^".*",".*",".*"$', re.MULTILINE),
    re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}"),
]
TIER_2_FILENAME = re.compile(r"\.(csv|json|xml|log)$", re.IGNORECASE)

TIER_1_PATTERNS: List[Pattern] = [
    re.compile(r"policy\s+document", re.IGNORECASE),
    re.compile(r"version\s+\d+", re.IGNORECASE),
    re.compile(r"approved\s+by", re.IGNORECASE),
    re.compile(r"effective\s+date", re.IGNORECASE),
    re.compile(r"procedure", re.IGNORECASE),
]
TIER_1_FILENAME = re.compile(r"policy|procedure|guideline", re.IGNORECASE)


@dataclass
class ClassificationResult:
    """Output of classify_document()."""
    tier: EvidenceTier
    confidence: Decimal            # [0, 1]
    reason: str
    indicators: Dict[str, bool] = field(default_factory=dict)


def classify_document(content: str, filename: str = "") -> ClassificationResult:
    """
    Classify a document's evidence tier from its text and filename.

    Only the first MAX_CONTENT_LENGTH characters are inspected.
    """
    text = (content or "")[:MAX_CONTENT_LENGTH]
    name = filename or ""

    if any(p.search(text) for p in TIER_2_PATTERNS) or TIER_2_FILENAME.search(name):
        result = ClassificationResult(
            tier=EvidenceTier.TIER_2,
            confidence=Decimal("0.70"),
            reason="System-generated format detected (CSV, JSON, logs, or timestamped data)",
            indicators={
                "has_timestamps": bool(re.search(r"\d{4}-\d{2}-\d{2}", text)),
                "is_structured_data": bool(re.search(r'^".*",".*"', text, re.MULTILINE))
                or name.lower().endswith(".csv"),
            },
        )
    elif any(p.search(text) for p in TIER_1_PATTERNS) or TIER_1_FILENAME.search(name):
        result = ClassificationResult(
            tier=EvidenceTier.TIER_1,
            confidence=Decimal("0.60"),
            reason="Policy document format detected (formal policies, procedures, or versioned documents)",
            indicators={
                "has_version_control": bool(TIER_1_PATTERNS[1].search(text)),
                "has_approval_signatures": bool(TIER_1_PATTERNS[2].search(text)),
            },
        )
    else:
        result = ClassificationResult(
            tier=EvidenceTier.TIER_0,
            confidence=Decimal("0.50"),
            reason="No formal structure or system-generated indicators found - classified as self-declared",
        )

    logger.debug(
        "document_classified",
        filename=name,
        tier=result.tier.value,
        confidence=float(result.confidence),
    )
    return result
