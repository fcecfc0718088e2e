"""
volorch - Volume-to-workload compiler

Compiles replicated block volume claims into cluster orchestrator jobs
and projects the orchestrator's jobs and evaluations back into volume
status.
"""

__version__ = "0.1.0"
__author__ = "Volume Orchestration Team"


__all__ = [
    "synthesize",
    "Synthesizer",
    "validate",
    "claim_to_job_name",
    "volume_to_job_stub",
    "from_evaluation",
    "from_job",
]

from .validator import validate
from .identity import claim_to_job_name, volume_to_job_stub
from .status import from_evaluation, from_job
from .synthesizer import Synthesizer, synthesize
