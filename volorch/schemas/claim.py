"""
VolumeClaim schema - the declarative volume request.

A VolumeClaim names a replicated block volume and carries its placement
and network topology hints as a flat label mapping. The validator parses
those labels once into a typed JivaClaimConfig so the synthesizer never
touches raw label keys.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class ClaimLabel(str, Enum):
    """
    Label keys recognized on a VolumeClaim.

    Generic placement labels are plain keys; jiva-specific labels are
    namespaced under the jiva volume domain.
    """
    REGION = "region"
    DATACENTER = "dc"
    JIVA_FE_IMAGE = "fe.jiva.volume.openebs.io/image-version"
    CN_TYPE = "cntype"
    JIVA_FE_IP = "fe.jiva.volume.openebs.io/ip"
    JIVA_BE_IP = "be.jiva.volume.openebs.io/ip"
    CN_SUBNET = "cnsubnet"
    CN_INTERFACE = "cninterface"

    # Engine discriminator, optional
    VOLUME_TYPE = "volume.openebs.io/type"

    @property
    def description(self) -> str:
        """Human readable name used in error messages."""
        return _LABEL_DESCRIPTIONS[self]


_LABEL_DESCRIPTIONS = {
    ClaimLabel.REGION: "region",
    ClaimLabel.DATACENTER: "datacenter",
    ClaimLabel.JIVA_FE_IMAGE: "jiva fe image version",
    ClaimLabel.CN_TYPE: "cn type",
    ClaimLabel.JIVA_FE_IP: "jiva fe ip",
    ClaimLabel.JIVA_BE_IP: "jiva be ip",
    ClaimLabel.CN_SUBNET: "cn subnet",
    ClaimLabel.CN_INTERFACE: "cn interface",
    ClaimLabel.VOLUME_TYPE: "volume type",
}

# Checked in this order; the first absent label is reported
REQUIRED_LABELS: tuple[ClaimLabel, ...] = (
    ClaimLabel.REGION,
    ClaimLabel.DATACENTER,
    ClaimLabel.JIVA_FE_IMAGE,
    ClaimLabel.CN_TYPE,
    ClaimLabel.JIVA_FE_IP,
    ClaimLabel.JIVA_BE_IP,
    ClaimLabel.CN_SUBNET,
    ClaimLabel.CN_INTERFACE,
)


@dataclass(frozen=True)
class VolumeClaim:
    """
    A request for a replicated network block volume.

    Attributes:
        name: Unique volume name, reused as job name and job ID
        labels: Placement and topology hints keyed by ClaimLabel values
    """
    name: str
    labels: Optional[dict[str, str]] = field(default_factory=dict)

    def label(self, key: ClaimLabel) -> str:
        """Get a label value, empty string when absent."""
        if not self.labels:
            return ""
        return self.labels.get(key.value, "") or ""

    @property
    def volume_type(self) -> Optional[str]:
        """The requested engine type, None when the claim does not say."""
        return self.label(ClaimLabel.VOLUME_TYPE) or None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON/YAML output."""
        return {
            "name": self.name,
            "labels": dict(self.labels or {}),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VolumeClaim":
        """Deserialize from dictionary."""
        labels = data.get("labels")
        return cls(
            name=data.get("name") or "",
            labels={str(k): "" if v is None else str(v) for k, v in labels.items()} if labels is not None else None,
        )


@dataclass(frozen=True)
class JivaClaimConfig:
    """
    Typed view of a validated claim's labels.

    Built only by the validator, so every field is non-empty.
    """
    region: str
    datacenter: str
    fe_image_version: str
    network_type: str
    fe_ip: str
    be_ip: str
    subnet: str
    interface: str

    @classmethod
    def from_claim(cls, claim: VolumeClaim) -> "JivaClaimConfig":
        """Read the recognized labels off a claim."""
        return cls(
            region=claim.label(ClaimLabel.REGION),
            datacenter=claim.label(ClaimLabel.DATACENTER),
            fe_image_version=claim.label(ClaimLabel.JIVA_FE_IMAGE),
            network_type=claim.label(ClaimLabel.CN_TYPE),
            fe_ip=claim.label(ClaimLabel.JIVA_FE_IP),
            be_ip=claim.label(ClaimLabel.JIVA_BE_IP),
            subnet=claim.label(ClaimLabel.CN_SUBNET),
            interface=claim.label(ClaimLabel.CN_INTERFACE),
        )
