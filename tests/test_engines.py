"""Tests for volorch.engines registry and base engine."""

import pytest

from volorch.engines import DEFAULT_ENGINE, EngineRegistry, JivaEngine, VolumeEngine
from volorch.errors import NilInputError, UnknownEngineError
from volorch.schemas import ClaimLabel, Evaluation, Job, VolumeClaim


class StubEngine(VolumeEngine):
    """Engine that lays out an empty job, for registry tests."""

    name = "stub"

    def synthesize(self, claim):
        return Job(name=claim.name, id=claim.name)


class TestEngineRegistry:
    """Tests for EngineRegistry."""

    def test_empty(self):
        registry = EngineRegistry()
        assert registry.list_engines() == []
        assert not registry.has("jiva")

    def test_register_and_get(self):
        registry = EngineRegistry()
        engine = StubEngine()
        registry.register(engine)
        assert registry.has("stub")
        assert registry.get("stub") is engine

    def test_register_under_other_name(self):
        registry = EngineRegistry()
        registry.register(StubEngine(), name="alias")
        assert registry.list_engines() == ["alias"]

    def test_get_unknown(self):
        registry = EngineRegistry()
        registry.register(StubEngine())
        with pytest.raises(UnknownEngineError) as exc_info:
            registry.get("cstor")
        assert exc_info.value.registered == ["stub"]

    def test_create_default(self):
        registry = EngineRegistry.create_default()
        assert registry.list_engines() == ["jiva"]
        assert registry.default_engine == DEFAULT_ENGINE == "jiva"
        assert isinstance(registry.get("jiva"), JivaEngine)

    def test_for_claim_default(self, vol1_claim):
        registry = EngineRegistry.create_default()
        assert isinstance(registry.for_claim(vol1_claim), JivaEngine)

    def test_for_claim_by_type(self, vol1_labels):
        registry = EngineRegistry.create_default()
        registry.register(StubEngine())
        claim = VolumeClaim(
            name="vol1",
            labels={**vol1_labels, ClaimLabel.VOLUME_TYPE.value: "stub"},
        )
        assert registry.for_claim(claim).synthesize(claim) == Job(name="vol1", id="vol1")

    def test_for_claim_nil(self):
        with pytest.raises(NilInputError):
            EngineRegistry.create_default().for_claim(None)


class TestVolumeEngine:
    """Tests for the shared status projections on VolumeEngine."""

    def test_is_abstract(self):
        with pytest.raises(TypeError):
            VolumeEngine()

    def test_from_evaluation_default(self):
        volume = StubEngine().from_evaluation("vol1", Evaluation(status="complete"))
        assert volume.name == "vol1"
        assert volume.reason == "complete"

    def test_from_job_default(self):
        job = Job(name="vol1", meta={"iqn": "x"}, status="running", status_description="ok")
        assert JivaEngine().from_job(job).annotations == {"iqn": "x"}

    def test_repr(self):
        assert repr(JivaEngine()) == "JivaEngine(name=jiva)"
