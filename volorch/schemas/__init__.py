"""
volorch.schemas - Schema definitions for the volume compiler.

This module defines the core data structures for volorch:

VolumeClaim -> JivaClaimConfig -> Job -> (Evaluation | Job) -> VolumeStatus

Lifecycle:
1. VolumeClaim: Caller-owned request with a name and topology labels
2. JivaClaimConfig: Typed view of the labels, built by the validator
3. Job: Synthesized workload submitted to the orchestrator
4. Evaluation: Orchestrator record of a scheduling attempt
5. VolumeStatus: Snapshot projected back from an Evaluation or Job
"""

from .claim import (
    ClaimLabel,
    JivaClaimConfig,
    REQUIRED_LABELS,
    VolumeClaim,
)
from .job import (
    JOB_STATUS_RUNNING,
    JOB_TYPE_SERVICE,
    Constraint,
    Job,
    LogConfig,
    NetworkResource,
    Resources,
    RestartPolicy,
    Task,
    TaskArtifact,
    TaskGroup,
)
from .evaluation import Evaluation
from .volume import VolumeStatus

__all__ = [
    # Claim
    "ClaimLabel",
    "JivaClaimConfig",
    "REQUIRED_LABELS",
    "VolumeClaim",
    # Job
    "JOB_STATUS_RUNNING",
    "JOB_TYPE_SERVICE",
    "Constraint",
    "Job",
    "LogConfig",
    "NetworkResource",
    "Resources",
    "RestartPolicy",
    "Task",
    "TaskArtifact",
    "TaskGroup",
    # Evaluation
    "Evaluation",
    # Volume
    "VolumeStatus",
]
