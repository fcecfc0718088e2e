"""
Base volume engine protocol.

A volume engine knows how one replicated block-storage engine is laid
out as an orchestrator job, and how that job's evaluations and states
read back as volume status. Engines are selected per claim by the
claim's volume type label.
"""

from abc import ABC, abstractmethod
from typing import Optional

from volorch import status
from volorch.schemas import Evaluation, Job, VolumeClaim, VolumeStatus


class VolumeEngine(ABC):
    """
    Abstract base class for volume engines.

    Subclasses implement synthesize(). The status projections default to
    the engine-neutral ones in volorch.status; an engine overrides them
    only when its jobs report status differently.
    """

    #: Engine type matched against the claim's volume type label
    name: str = ""

    @abstractmethod
    def synthesize(self, claim: Optional[VolumeClaim]) -> Job:
        """
        Build the orchestrator job for a claim.

        Args:
            claim: The volume claim

        Returns:
            A complete Job ready for submission

        Raises:
            MissingFieldError: If the claim is incomplete
        """
        pass

    def from_evaluation(self, job_name: str, evaluation: Optional[Evaluation]) -> VolumeStatus:
        """Project an evaluation of this engine's job into a volume status."""
        return status.from_evaluation(job_name, evaluation)

    def from_job(self, job: Optional[Job]) -> VolumeStatus:
        """Project this engine's job into a volume status."""
        return status.from_job(job)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name})"
