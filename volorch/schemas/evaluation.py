"""
Evaluation schema - the orchestrator's record of a scheduling attempt.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Evaluation:
    """
    Outcome of the orchestrator trying to schedule a job.

    Attributes:
        id: Evaluation ID
        priority: Priority of the evaluated job
        type: Scheduler type of the evaluated job
        triggered_by: What caused the evaluation, e.g. "job-register"
        job_id: ID of the evaluated job
        status: Evaluation status, e.g. "complete" or "blocked"
        status_description: Free-form detail for status
        blocked_eval: ID of the blocked evaluation spawned by this one
    """
    id: str = ""
    priority: int = 0
    type: str = ""
    triggered_by: str = ""
    job_id: str = ""
    status: str = ""
    status_description: str = ""
    blocked_eval: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the orchestrator's JSON evaluation shape."""
        return {
            "ID": self.id,
            "Priority": self.priority,
            "Type": self.type,
            "TriggeredBy": self.triggered_by,
            "JobID": self.job_id,
            "Status": self.status,
            "StatusDescription": self.status_description,
            "BlockedEval": self.blocked_eval,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Evaluation":
        """Deserialize from the orchestrator's JSON evaluation shape."""
        return cls(
            id=data.get("ID") or "",
            priority=int(data.get("Priority") or 0),
            type=data.get("Type") or "",
            triggered_by=data.get("TriggeredBy") or "",
            job_id=data.get("JobID") or "",
            status=data.get("Status") or "",
            status_description=data.get("StatusDescription") or "",
            blocked_eval=data.get("BlockedEval") or "",
        )
