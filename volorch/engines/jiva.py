"""
Jiva engine - replicated block volume as a two-group orchestrator job.

A jiva volume is one controller (frontend) exposing an iSCSI target and
one replica (backend) holding a copy of the data. Each runs in its own
task group so the orchestrator restarts them independently. The replica
finds its controller through the controller IP passed in its env.

Orchestrator defaults (priority, restart policy, resources, log
rotation) and the jiva launch conventions (env names, launcher scripts)
are fixed; only the claim's name and labels vary between jobs.
"""

import logging
from datetime import timedelta
from typing import Optional

from volorch.engines.base import VolumeEngine
from volorch.schemas import (
    JOB_TYPE_SERVICE,
    Constraint,
    JivaClaimConfig,
    Job,
    LogConfig,
    NetworkResource,
    Resources,
    RestartPolicy,
    Task,
    TaskArtifact,
    TaskGroup,
    VolumeClaim,
)
from volorch.validator import parse_config

logger = logging.getLogger(__name__)

# Orchestrator defaults
JOB_PRIORITY = 50
KERNEL_CONSTRAINT = Constraint(l_target="${attr.kernel.name}", operand="=", r_target="linux")
TASK_DRIVER = "raw_exec"

RESTART_ATTEMPTS = 3
RESTART_INTERVAL = timedelta(minutes=5)
RESTART_DELAY = timedelta(seconds=25)
RESTART_MODE = "delay"

TASK_CPU = 500
TASK_MEMORY_MB = 256
TASK_NETWORK_MBITS = 400

LOG_MAX_FILES = 3
LOG_MAX_FILE_SIZE_MB = 1

# Jiva conventions
JIVA_GROUP_SUFFIX = "pod"
JIVA_FE_GROUP = "fe" + JIVA_GROUP_SUFFIX
JIVA_BE_GROUP = "be" + JIVA_GROUP_SUFFIX
JIVA_FE_TASK = "fe1"
JIVA_BE_TASK = "be1"

# TODO: read the size from the claim once claims carry a capacity
JIVA_VOLUME_SIZE = "5g"
JIVA_VOLSTORE_BASE = "/tmp/jiva/"

JIVA_ISCSI_TARGET_PORTAL_PORT = "3260"
JIVA_IQN_PREFIX = "iqn.2016-09.com.openebs.jiva"

JIVA_SCRIPTS_URL = "https://raw.githubusercontent.com/openebs/jiva/master/scripts/"
JIVA_CTL_SCRIPT = "launch-jiva-ctl-with-ip"
JIVA_REP_SCRIPT = "launch-jiva-rep-with-ip"
ARTIFACT_DEST = "local/"

# Job meta keys read by volume clients
META_TARGET_PORTAL = "targetportal"
META_IQN = "iqn"


def _restart_policy() -> RestartPolicy:
    return RestartPolicy(
        attempts=RESTART_ATTEMPTS,
        interval=RESTART_INTERVAL,
        delay=RESTART_DELAY,
        mode=RESTART_MODE,
    )


def _resources() -> Resources:
    return Resources(
        cpu=TASK_CPU,
        memory_mb=TASK_MEMORY_MB,
        networks=(NetworkResource(mbits=TASK_NETWORK_MBITS),),
    )


def _log_config() -> LogConfig:
    return LogConfig(max_files=LOG_MAX_FILES, max_file_size_mb=LOG_MAX_FILE_SIZE_MB)


def _launcher_task(name: str, script: str, env: dict[str, str]) -> Task:
    """A raw_exec task that fetches a launcher script and runs it."""
    return Task(
        name=name,
        driver=TASK_DRIVER,
        resources=_resources(),
        env=env,
        artifacts=(
            TaskArtifact(getter_source=JIVA_SCRIPTS_URL + script, relative_dest=ARTIFACT_DEST),
        ),
        config={"command": script},
        log_config=_log_config(),
    )


def _task_group(name: str, task: Task) -> TaskGroup:
    return TaskGroup(
        name=name,
        count=1,
        restart_policy=_restart_policy(),
        tasks=(task,),
    )


def target_portal(fe_ip: str) -> str:
    """iSCSI target portal of a volume, controller IP plus the iSCSI port."""
    return fe_ip + ":" + JIVA_ISCSI_TARGET_PORTAL_PORT


def iqn(volume_name: str) -> str:
    """iSCSI qualified name of a volume."""
    return JIVA_IQN_PREFIX + ":" + volume_name


class JivaEngine(VolumeEngine):
    """
    Default engine: jiva controller plus one jiva replica.

    Usage:
        engine = JivaEngine()
        job = engine.synthesize(claim)
    """

    name = "jiva"

    def synthesize(self, claim: Optional[VolumeClaim]) -> Job:
        """
        Build the jiva job for a claim.

        The claim is validated first; no job is built for an incomplete
        claim.

        Raises:
            NilInputError: If claim is None
            MissingFieldError: If the name or a required label is missing
        """
        config = parse_config(claim)
        vol_name = claim.name

        job = Job(
            region=config.region,
            name=vol_name,
            id=vol_name,
            datacenters=(config.datacenter,),
            type=JOB_TYPE_SERVICE,
            priority=JOB_PRIORITY,
            constraints=(KERNEL_CONSTRAINT,),
            meta={
                META_TARGET_PORTAL: target_portal(config.fe_ip),
                META_IQN: iqn(vol_name),
            },
            task_groups=(
                _task_group(JIVA_FE_GROUP, self._frontend_task(vol_name, config)),
                _task_group(JIVA_BE_GROUP, self._backend_task(vol_name, config)),
            ),
        )

        logger.info(
            f"Synthesized jiva job: {vol_name} "
            f"(region={config.region}, dc={config.datacenter}, fe={config.fe_ip}, be={config.be_ip})",
            extra={"volume": vol_name, "engine": self.name},
        )
        return job

    def _frontend_task(self, vol_name: str, config: JivaClaimConfig) -> Task:
        """The jiva controller, exporting the volume as an iSCSI target."""
        env = {
            "JIVA_CTL_NAME": vol_name + "-" + JIVA_FE_GROUP + "-" + JIVA_FE_TASK,
            "JIVA_CTL_VERSION": config.fe_image_version,
            "JIVA_CTL_VOLNAME": vol_name,
            "JIVA_CTL_VOLSIZE": JIVA_VOLUME_SIZE,
            "JIVA_CTL_IP": config.fe_ip,
            "JIVA_CTL_SUBNET": config.subnet,
            "JIVA_CTL_IFACE": config.interface,
        }
        return _launcher_task(JIVA_FE_TASK, JIVA_CTL_SCRIPT, env)

    def _backend_task(self, vol_name: str, config: JivaClaimConfig) -> Task:
        """The jiva replica, registering with the controller at JIVA_CTL_IP."""
        env = {
            "JIVA_REP_NAME": vol_name + "-" + JIVA_BE_GROUP + "-" + JIVA_BE_TASK,
            "JIVA_CTL_IP": config.fe_ip,
            "JIVA_REP_VOLNAME": vol_name,
            "JIVA_REP_VOLSIZE": JIVA_VOLUME_SIZE,
            "JIVA_REP_VOLSTORE": JIVA_VOLSTORE_BASE + vol_name + JIVA_BE_GROUP + "/" + JIVA_BE_TASK,
            "JIVA_REP_VERSION": config.fe_image_version,
            "JIVA_REP_NETWORK": config.network_type,
            "JIVA_REP_IFACE": config.interface,
            "JIVA_REP_IP": config.be_ip,
            "JIVA_REP_SUBNET": config.subnet,
        }
        return _launcher_task(JIVA_BE_TASK, JIVA_REP_SCRIPT, env)
