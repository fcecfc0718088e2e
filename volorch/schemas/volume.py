"""
VolumeStatus schema - the observable state of a volume.

A VolumeStatus is a fresh snapshot projected from an orchestrator
Evaluation or Job. It is never updated in place.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class VolumeStatus:
    """
    Snapshot of a volume's status.

    Attributes:
        name: Volume name (same as the job name)
        message: Human readable detail, from the orchestrator status description
        reason: Machine readable status, from the orchestrator status
        annotations: Evaluation metadata, or the running job's metadata
    """
    name: str
    message: str = ""
    reason: str = ""
    annotations: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON/YAML output."""
        return {
            "name": self.name,
            "annotations": dict(self.annotations),
            "status": {
                "message": self.message,
                "reason": self.reason,
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VolumeStatus":
        """Deserialize from dictionary."""
        status = data.get("status") or {}
        return cls(
            name=data["name"],
            message=status.get("message", ""),
            reason=status.get("reason", ""),
            annotations=dict(data.get("annotations") or {}),
        )
