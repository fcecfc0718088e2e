"""
Claim validation.

A claim must carry a name and every label the synthesizer reads. Each
missing field raises its own MissingFieldError so callers can report
exactly what is missing. Validation has no side effects.
"""

import logging
from typing import Optional

from volorch.errors import MissingFieldError, NilInputError
from volorch.schemas import REQUIRED_LABELS, JivaClaimConfig, VolumeClaim

logger = logging.getLogger(__name__)


def validate(claim: Optional[VolumeClaim]) -> VolumeClaim:
    """
    Check that a claim can be synthesized into a job.

    Args:
        claim: The volume claim to check

    Returns:
        The same claim, unchanged

    Raises:
        NilInputError: If claim is None
        MissingFieldError: If the name, the label mapping, or any required
            label is absent or empty. Name is checked before labels.
    """
    if claim is None:
        raise NilInputError("claim", "Nil volume claim provided")

    if not claim.name:
        raise MissingFieldError("name", "Missing name in volume claim")

    if claim.labels is None:
        raise MissingFieldError("labels", "Missing labels in volume claim")

    for label in REQUIRED_LABELS:
        if not claim.label(label):
            raise MissingFieldError(
                label.value,
                f"Missing {label.description} in volume claim",
            )

    logger.debug(f"Claim validated: {claim.name}")
    return claim


def parse_config(claim: Optional[VolumeClaim]) -> JivaClaimConfig:
    """
    Validate a claim and read its labels into a typed record.

    Raises:
        NilInputError, MissingFieldError: As for validate()
    """
    return JivaClaimConfig.from_claim(validate(claim))
