"""Tests for volorch.schemas module.

Tests claim label access, reading orchestrator JSON into Job and
Evaluation, and VolumeStatus serialization.
"""

from datetime import timedelta

from volorch.schemas import (
    ClaimLabel,
    Evaluation,
    Job,
    RestartPolicy,
    VolumeClaim,
    VolumeStatus,
)


# =============================================================================
# VolumeClaim TESTS
# =============================================================================


class TestVolumeClaim:
    """Tests for VolumeClaim."""

    def test_label_present(self, vol1_claim):
        assert vol1_claim.label(ClaimLabel.REGION) == "us-east"

    def test_label_absent(self):
        claim = VolumeClaim(name="vol1", labels={})
        assert claim.label(ClaimLabel.REGION) == ""

    def test_label_with_no_mapping(self):
        claim = VolumeClaim(name="vol1", labels=None)
        assert claim.label(ClaimLabel.REGION) == ""

    def test_volume_type(self, vol1_labels):
        claim = VolumeClaim(
            name="vol1",
            labels={**vol1_labels, ClaimLabel.VOLUME_TYPE.value: "jiva"},
        )
        assert claim.volume_type == "jiva"

    def test_from_dict(self):
        claim = VolumeClaim.from_dict({"name": "vol1", "labels": {"region": "us-east", "dc": 1}})
        assert claim.name == "vol1"
        assert claim.labels == {"region": "us-east", "dc": "1"}

    def test_from_dict_without_labels(self):
        claim = VolumeClaim.from_dict({"name": "vol1"})
        assert claim.labels is None

    def test_from_dict_without_name(self):
        assert VolumeClaim.from_dict({"labels": {}}).name == ""

    def test_from_dict_null_label_is_empty(self):
        claim = VolumeClaim.from_dict({"name": "vol1", "labels": {"region": None, "dc": "dc1"}})
        assert claim.labels == {"region": "", "dc": "dc1"}
        assert claim.label(ClaimLabel.REGION) == ""

    def test_from_dict_null_name(self):
        assert VolumeClaim.from_dict({"name": None, "labels": {}}).name == ""

    def test_to_dict(self, vol1_claim, vol1_labels):
        assert vol1_claim.to_dict() == {"name": "vol1", "labels": vol1_labels}

    def test_label_descriptions(self):
        assert ClaimLabel.DATACENTER.description == "datacenter"
        assert ClaimLabel.JIVA_BE_IP.description == "jiva be ip"


# =============================================================================
# Job TESTS
# =============================================================================


class TestJob:
    """Tests for Job read from orchestrator JSON."""

    def test_from_orchestrator_json(self):
        job = Job.from_dict({
            "ID": "vol1",
            "Name": "vol1",
            "Region": "us-east",
            "Datacenters": ["dc1"],
            "Type": "service",
            "Priority": 50,
            "Status": "running",
            "StatusDescription": "",
            "Meta": {"iqn": "iqn.2016-09.com.openebs.jiva:vol1"},
            "TaskGroups": [{
                "Name": "fepod",
                "Count": 1,
                "RestartPolicy": {
                    "Attempts": 3,
                    "Interval": 300000000000,
                    "Delay": 25000000000,
                    "Mode": "delay",
                },
                "Tasks": [{"Name": "fe1", "Driver": "raw_exec", "Resources": {"CPU": 500}}],
            }],
            "ModifyIndex": 42,
        })
        assert job.status == "running"
        assert job.status_description == ""
        assert job.datacenters == ("dc1",)
        group = job.get_task_group("fepod")
        assert group.restart_policy.interval == timedelta(minutes=5)
        assert group.get_task("fe1").resources.cpu == 500
        assert group.get_task("fe1").log_config is None

    def test_missing_fields_are_none(self):
        job = Job.from_dict({})
        assert job.name is None
        assert job.status is None
        assert job.meta == {}

    def test_null_collections(self):
        job = Job.from_dict({"Name": "vol1", "Meta": None, "TaskGroups": None})
        assert job.meta == {}
        assert job.task_groups == ()

    def test_get_missing_group(self):
        assert Job(name="vol1").get_task_group("fepod") is None


class TestRestartPolicy:
    """Tests for RestartPolicy durations."""

    def test_sub_second_delay(self):
        policy = RestartPolicy(
            attempts=1,
            interval=timedelta(minutes=1),
            delay=timedelta(milliseconds=1500),
            mode="fail",
        )
        assert policy.to_dict()["Delay"] == 1_500_000_000
        assert RestartPolicy.from_dict(policy.to_dict()) == policy


# =============================================================================
# Evaluation TESTS
# =============================================================================


class TestEvaluation:
    """Tests for Evaluation."""

    def test_from_orchestrator_json(self):
        evaluation = Evaluation.from_dict({
            "ID": "8b1c2d3e",
            "Priority": 50,
            "Type": "service",
            "TriggeredBy": "job-register",
            "JobID": "vol1",
            "Status": "complete",
            "StatusDescription": "",
            "BlockedEval": "",
            "CreateIndex": 12,
        })
        assert evaluation.id == "8b1c2d3e"
        assert evaluation.priority == 50
        assert evaluation.triggered_by == "job-register"
        assert evaluation.job_id == "vol1"

    def test_defaults(self):
        evaluation = Evaluation.from_dict({})
        assert evaluation.priority == 0
        assert evaluation.blocked_eval == ""

    def test_null_fields(self):
        evaluation = Evaluation.from_dict({
            "ID": "e1",
            "Priority": None,
            "Status": None,
            "BlockedEval": None,
        })
        assert evaluation.priority == 0
        assert evaluation.status == ""
        assert evaluation.blocked_eval == ""
        assert None not in evaluation.to_dict().values()


# =============================================================================
# VolumeStatus TESTS
# =============================================================================


class TestVolumeStatus:
    """Tests for VolumeStatus."""

    def test_to_dict(self):
        volume = VolumeStatus(
            name="vol1",
            message="ok",
            reason="running",
            annotations={"iqn": "x"},
        )
        assert volume.to_dict() == {
            "name": "vol1",
            "annotations": {"iqn": "x"},
            "status": {"message": "ok", "reason": "running"},
        }

    def test_from_dict(self):
        volume = VolumeStatus.from_dict({"name": "vol1", "status": {"reason": "pending"}})
        assert volume.reason == "pending"
        assert volume.message == ""
        assert volume.annotations == {}
