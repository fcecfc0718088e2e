"""
Status projection - orchestrator objects back into volume status.

Two entry points share one output shape:
- from_evaluation: status of a scheduling attempt, with the evaluation's
  fields mirrored into annotations
- from_job: status of a job; connection metadata is surfaced only while
  the job is running, since it may not be valid in any other state
"""

import logging
from typing import Optional

from volorch.errors import MissingFieldError, NilInputError
from volorch.schemas import JOB_STATUS_RUNNING, Evaluation, Job, VolumeStatus

logger = logging.getLogger(__name__)

# Annotation keys mirrored from an Evaluation
EVAL_PRIORITY = "evalpriority"
EVAL_TYPE = "evaltype"
EVAL_TRIGGER = "evaltrigger"
EVAL_JOB = "evaljob"
EVAL_STATUS = "evalstatus"
EVAL_STATUS_DESC = "evalstatusdesc"
EVAL_BLOCKED_EVAL = "evalblockedeval"

EVAL_ANNOTATION_KEYS = (
    EVAL_PRIORITY,
    EVAL_TYPE,
    EVAL_TRIGGER,
    EVAL_JOB,
    EVAL_STATUS,
    EVAL_STATUS_DESC,
    EVAL_BLOCKED_EVAL,
)


def from_evaluation(job_name: str, evaluation: Optional[Evaluation]) -> VolumeStatus:
    """
    Project a job evaluation into a volume status.

    Args:
        job_name: Name of the evaluated job, used as the volume name
        evaluation: The orchestrator's evaluation record

    Returns:
        VolumeStatus with message/reason from the evaluation's status
        description/status and exactly the seven evaluation annotations

    Raises:
        NilInputError: If evaluation is None
    """
    if evaluation is None:
        raise NilInputError("evaluation", "Nil job evaluation provided")

    annotations = {
        EVAL_PRIORITY: str(evaluation.priority),
        EVAL_TYPE: evaluation.type,
        EVAL_TRIGGER: evaluation.triggered_by,
        EVAL_JOB: evaluation.job_id,
        EVAL_STATUS: evaluation.status,
        EVAL_STATUS_DESC: evaluation.status_description,
        EVAL_BLOCKED_EVAL: evaluation.blocked_eval,
    }

    logger.debug(f"Projected evaluation {evaluation.id} of {job_name}: {evaluation.status}")
    return VolumeStatus(
        name=job_name,
        message=evaluation.status_description,
        reason=evaluation.status,
        annotations=annotations,
    )


def from_job(job: Optional[Job]) -> VolumeStatus:
    """
    Project an orchestrator job into a volume status.

    Args:
        job: Job as reported by the orchestrator

    Returns:
        VolumeStatus with message/reason from the job's status
        description/status. Annotations are a copy of the job's meta when
        the job is running, empty otherwise.

    Raises:
        NilInputError: If job is None
        MissingFieldError: If the job's name, status or status
            description was not reported
    """
    if job is None:
        raise NilInputError("job", "Nil job provided")

    if job.name is None:
        raise MissingFieldError("name", "Missing name in job")
    if job.status is None:
        raise MissingFieldError("status", f"Missing status in job {job.name}")
    if job.status_description is None:
        raise MissingFieldError(
            "status_description", f"Missing status description in job {job.name}"
        )

    annotations: dict[str, str] = {}
    if job.status == JOB_STATUS_RUNNING:
        annotations = dict(job.meta)

    logger.debug(f"Projected job {job.name}: {job.status}")
    return VolumeStatus(
        name=job.name,
        message=job.status_description,
        reason=job.status,
        annotations=annotations,
    )
