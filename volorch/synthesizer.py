"""
Synthesizer - Transform a VolumeClaim into an orchestrator Job.

The synthesizer selects the engine for the claim's volume type and lets
it lay out the job. The result:
- Is a pure function of the claim (no I/O, no clock, no randomness)
- Is complete or not returned at all (validation runs first)
"""

from typing import Optional

from volorch.engines import EngineRegistry
from volorch.schemas import Evaluation, Job, VolumeClaim, VolumeStatus


class Synthesizer:
    """
    Synthesizer for transforming claims into jobs and back into status.

    Usage:
        synthesizer = Synthesizer()
        job = synthesizer.synthesize(claim)
        status = synthesizer.from_job(claim, job)
    """

    def __init__(self, registry: Optional[EngineRegistry] = None):
        """
        Initialize the synthesizer.

        Args:
            registry: EngineRegistry to select engines from, defaults to
                the built-in engines
        """
        self._registry = registry or EngineRegistry.create_default()

    @property
    def registry(self) -> EngineRegistry:
        return self._registry

    def synthesize(self, claim: Optional[VolumeClaim]) -> Job:
        """
        Synthesize the job for a claim.

        Args:
            claim: The volume claim

        Returns:
            A complete Job ready for submission

        Raises:
            NilInputError: If claim is None
            MissingFieldError: If the claim is missing its name or a label
            UnknownEngineError: If the claim's volume type is not registered
        """
        return self._registry.for_claim(claim).synthesize(claim)

    def from_evaluation(
        self,
        claim: VolumeClaim,
        evaluation: Optional[Evaluation],
    ) -> VolumeStatus:
        """Project an evaluation of the claim's job through the claim's engine."""
        engine = self._registry.for_claim(claim)
        return engine.from_evaluation(claim.name, evaluation)

    def from_job(self, claim: VolumeClaim, job: Optional[Job]) -> VolumeStatus:
        """Project the claim's job through the claim's engine."""
        return self._registry.for_claim(claim).from_job(job)


def synthesize(claim: Optional[VolumeClaim]) -> Job:
    """
    Convenience function to synthesize a job with the built-in engines.

    Args:
        claim: The volume claim

    Returns:
        A complete Job ready for submission
    """
    return Synthesizer().synthesize(claim)
