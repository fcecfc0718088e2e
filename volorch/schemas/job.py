"""
Job schema - the workload handed to the cluster orchestrator.

The dataclasses mirror the orchestrator's job API. to_dict() emits the
orchestrator's JSON wire shape (PascalCase keys, durations as integer
nanoseconds) and from_dict() reads the same shape back, so a Job can be
submitted as-is and a Job fetched from the orchestrator can be projected
into a VolumeStatus.
"""

import hashlib
import json
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Optional

JOB_TYPE_SERVICE = "service"
JOB_STATUS_RUNNING = "running"

_NS_PER_SECOND = 1_000_000_000


def _to_ns(value: timedelta) -> int:
    """Convert a timedelta to integer nanoseconds."""
    return (value.days * 86400 + value.seconds) * _NS_PER_SECOND + value.microseconds * 1000


def _from_ns(value: int) -> timedelta:
    """Convert integer nanoseconds to a timedelta."""
    return timedelta(microseconds=value // 1000)


@dataclass(frozen=True)
class Constraint:
    """A placement constraint, e.g. ${attr.kernel.name} = linux."""
    l_target: str
    operand: str
    r_target: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "LTarget": self.l_target,
            "RTarget": self.r_target,
            "Operand": self.operand,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Constraint":
        return cls(
            l_target=data.get("LTarget", ""),
            operand=data.get("Operand", ""),
            r_target=data.get("RTarget", ""),
        )


@dataclass(frozen=True)
class RestartPolicy:
    """
    Restart policy of a task group.

    Attributes:
        attempts: Restarts allowed within interval
        interval: Window in which attempts are counted
        delay: Wait between restarts
        mode: Behaviour once attempts are exhausted ("delay" or "fail")
    """
    attempts: int
    interval: timedelta
    delay: timedelta
    mode: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "Attempts": self.attempts,
            "Interval": _to_ns(self.interval),
            "Delay": _to_ns(self.delay),
            "Mode": self.mode,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RestartPolicy":
        return cls(
            attempts=data.get("Attempts", 0),
            interval=_from_ns(data.get("Interval", 0)),
            delay=_from_ns(data.get("Delay", 0)),
            mode=data.get("Mode", ""),
        )


@dataclass(frozen=True)
class NetworkResource:
    """Network share reserved for a task, in megabits."""
    mbits: int

    def to_dict(self) -> dict[str, Any]:
        return {"MBits": self.mbits}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NetworkResource":
        return cls(mbits=data.get("MBits", 0))


@dataclass(frozen=True)
class Resources:
    """Resource reservation of a task."""
    cpu: int
    memory_mb: int
    networks: tuple[NetworkResource, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "CPU": self.cpu,
            "MemoryMB": self.memory_mb,
            "Networks": [n.to_dict() for n in self.networks],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Resources":
        return cls(
            cpu=data.get("CPU", 0),
            memory_mb=data.get("MemoryMB", 0),
            networks=tuple(NetworkResource.from_dict(n) for n in data.get("Networks") or []),
        )


@dataclass(frozen=True)
class TaskArtifact:
    """An artifact the orchestrator client fetches before starting the task."""
    getter_source: str
    relative_dest: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "GetterSource": self.getter_source,
            "RelativeDest": self.relative_dest,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TaskArtifact":
        return cls(
            getter_source=data.get("GetterSource", ""),
            relative_dest=data.get("RelativeDest", ""),
        )


@dataclass(frozen=True)
class LogConfig:
    """Log rotation policy of a task."""
    max_files: int
    max_file_size_mb: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "MaxFiles": self.max_files,
            "MaxFileSizeMB": self.max_file_size_mb,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LogConfig":
        return cls(
            max_files=data.get("MaxFiles", 0),
            max_file_size_mb=data.get("MaxFileSizeMB", 0),
        )


@dataclass(frozen=True)
class Task:
    """
    A single process run by the orchestrator.

    Attributes:
        name: Task name, unique within its group
        driver: Execution driver identifier
        resources: CPU, memory and network reservation
        env: Environment passed to the process
        artifacts: Files fetched into the task directory before launch
        config: Driver configuration, e.g. {"command": "launch-script"}
        log_config: Log rotation policy
    """
    name: str
    driver: str
    resources: Resources
    env: dict[str, str] = field(default_factory=dict)
    artifacts: tuple[TaskArtifact, ...] = field(default_factory=tuple)
    config: dict[str, Any] = field(default_factory=dict)
    log_config: Optional[LogConfig] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "Name": self.name,
            "Driver": self.driver,
            "Resources": self.resources.to_dict(),
            "Env": dict(self.env),
            "Artifacts": [a.to_dict() for a in self.artifacts],
            "Config": dict(self.config),
            **({"LogConfig": self.log_config.to_dict()} if self.log_config else {}),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        log_config = data.get("LogConfig")
        return cls(
            name=data.get("Name", ""),
            driver=data.get("Driver", ""),
            resources=Resources.from_dict(data.get("Resources") or {}),
            env=dict(data.get("Env") or {}),
            artifacts=tuple(TaskArtifact.from_dict(a) for a in data.get("Artifacts") or []),
            config=dict(data.get("Config") or {}),
            log_config=LogConfig.from_dict(log_config) if log_config else None,
        )


@dataclass(frozen=True)
class TaskGroup:
    """A named, independently restarted group of tasks."""
    name: str
    count: int
    restart_policy: RestartPolicy
    tasks: tuple[Task, ...] = field(default_factory=tuple)

    def get_task(self, name: str) -> Optional[Task]:
        """Get a task by name."""
        for task in self.tasks:
            if task.name == name:
                return task
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "Name": self.name,
            "Count": self.count,
            "RestartPolicy": self.restart_policy.to_dict(),
            "Tasks": [t.to_dict() for t in self.tasks],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TaskGroup":
        return cls(
            name=data.get("Name", ""),
            count=data.get("Count", 0),
            restart_policy=RestartPolicy.from_dict(data.get("RestartPolicy") or {}),
            tasks=tuple(Task.from_dict(t) for t in data.get("Tasks") or []),
        )


@dataclass(frozen=True)
class Job:
    """
    A job as understood by the cluster orchestrator.

    Synthesized jobs carry every field except status and
    status_description, which only the orchestrator fills in. A job stub
    used for lookup or deletion carries only name and id.

    Attributes:
        name: Job name (same as the volume name)
        id: Job ID (same as name)
        region: Target region
        datacenters: Target datacenters
        type: Scheduler type, "service" for long-running volumes
        priority: Scheduling priority
        constraints: Placement constraints
        meta: Metadata exposed to clients, e.g. iSCSI connection info
        task_groups: Frontend and backend groups
        status: Orchestrator-reported status, e.g. "running"
        status_description: Orchestrator-reported status detail
    """
    name: Optional[str] = None
    id: Optional[str] = None
    region: Optional[str] = None
    datacenters: tuple[str, ...] = field(default_factory=tuple)
    type: Optional[str] = None
    priority: Optional[int] = None
    constraints: tuple[Constraint, ...] = field(default_factory=tuple)
    meta: dict[str, str] = field(default_factory=dict)
    task_groups: tuple[TaskGroup, ...] = field(default_factory=tuple)
    status: Optional[str] = None
    status_description: Optional[str] = None

    def get_task_group(self, name: str) -> Optional[TaskGroup]:
        """Get a task group by name."""
        for group in self.task_groups:
            if group.name == name:
                return group
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the orchestrator's JSON job shape."""
        return {
            **({"Region": self.region} if self.region is not None else {}),
            "ID": self.id,
            "Name": self.name,
            **({"Type": self.type} if self.type is not None else {}),
            **({"Priority": self.priority} if self.priority is not None else {}),
            **({"Datacenters": list(self.datacenters)} if self.datacenters else {}),
            **({"Constraints": [c.to_dict() for c in self.constraints]} if self.constraints else {}),
            **({"TaskGroups": [g.to_dict() for g in self.task_groups]} if self.task_groups else {}),
            **({"Meta": dict(self.meta)} if self.meta else {}),
            **({"Status": self.status} if self.status is not None else {}),
            **({"StatusDescription": self.status_description}
               if self.status_description is not None else {}),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Job":
        """Deserialize from the orchestrator's JSON job shape."""
        return cls(
            name=data.get("Name"),
            id=data.get("ID"),
            region=data.get("Region"),
            datacenters=tuple(data.get("Datacenters") or ()),
            type=data.get("Type"),
            priority=data.get("Priority"),
            constraints=tuple(Constraint.from_dict(c) for c in data.get("Constraints") or []),
            meta=dict(data.get("Meta") or {}),
            task_groups=tuple(TaskGroup.from_dict(g) for g in data.get("TaskGroups") or []),
            status=data.get("Status"),
            status_description=data.get("StatusDescription"),
        )

    def content_hash(self) -> str:
        """
        SHA256 of the canonical JSON form.

        Identical claims synthesize identical jobs, so equal hashes mean
        the orchestrator would see the same submission.
        """
        canonical = json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(canonical.encode()).hexdigest()
