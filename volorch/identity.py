"""
Identity mapping between claims, jobs and volumes.

Claim name, job name, job ID and volume name are the same string.
"""

from typing import Optional

from volorch.errors import MissingFieldError, NilInputError
from volorch.schemas import Job, VolumeClaim, VolumeStatus


def claim_to_job_name(claim: Optional[VolumeClaim]) -> str:
    """
    Get the job name for a claim.

    Raises:
        NilInputError: If claim is None
        MissingFieldError: If the claim has no name
    """
    if claim is None:
        raise NilInputError("claim", "Nil volume claim provided")

    if not claim.name:
        raise MissingFieldError("name", "Missing name in volume claim")

    return claim.name


def volume_to_job_stub(volume: Optional[VolumeStatus]) -> Job:
    """
    Build an identity-only job reference for lookup or deletion calls.

    The stub carries the name and ID and nothing else; it is not a
    synthesized job.

    Raises:
        NilInputError: If volume is None
    """
    if volume is None:
        raise NilInputError("volume", "Nil volume provided")

    return Job(name=volume.name, id=volume.name)
