import pytest

from volorch.schemas import ClaimLabel, VolumeClaim


@pytest.fixture
def vol1_labels():
    return {
        ClaimLabel.REGION.value: "us-east",
        ClaimLabel.DATACENTER.value: "dc1",
        ClaimLabel.JIVA_FE_IMAGE.value: "v1",
        ClaimLabel.CN_TYPE.value: "flat",
        ClaimLabel.JIVA_FE_IP.value: "10.0.0.5",
        ClaimLabel.JIVA_BE_IP.value: "10.0.0.6",
        ClaimLabel.CN_SUBNET.value: "10.0.0.0/24",
        ClaimLabel.CN_INTERFACE.value: "eth0",
    }


@pytest.fixture
def vol1_claim(vol1_labels):
    return VolumeClaim(name="vol1", labels=vol1_labels)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    # Never read a developer's real config during tests
    monkeypatch.setenv("VOLORCH_HOME", str(tmp_path / "volorch_home"))
