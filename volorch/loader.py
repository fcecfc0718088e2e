"""
Load claims and orchestrator objects from YAML or JSON files.

Claims use the plain {name, labels} shape. Jobs and evaluations use the
orchestrator's JSON shape; a job file may also be the orchestrator's
{"Job": {...}} envelope.
"""

import json
from pathlib import Path
from typing import Any

import yaml

from volorch.errors import PermanentError
from volorch.schemas import Evaluation, Job, VolumeClaim


class LoadError(PermanentError):
    """Raised when a file cannot be read or parsed."""
    pass


def _load_file(path: Path) -> dict[str, Any]:
    """
    Load a YAML or JSON file into a dictionary.

    Raises:
        LoadError: If the file is missing, has an unsupported extension,
            or does not contain a mapping
    """
    if not path.exists():
        raise LoadError(f"File not found: {path}")

    suffix = path.suffix.lower()
    try:
        with open(path) as f:
            if suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            elif suffix == ".json":
                data = json.load(f)
            else:
                raise LoadError(f"Unsupported file format: {suffix}")
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise LoadError(f"Failed to parse {path}: {e}")

    if not isinstance(data, dict):
        raise LoadError(f"Expected a mapping in {path}")
    return data


def load_claim(path: Path | str) -> VolumeClaim:
    """Load a VolumeClaim from a YAML or JSON file."""
    return VolumeClaim.from_dict(_load_file(Path(path)))


def load_job(path: Path | str) -> Job:
    """Load an orchestrator Job from a YAML or JSON file."""
    data = _load_file(Path(path))
    if "Job" in data and isinstance(data["Job"], dict):
        data = data["Job"]
    return Job.from_dict(data)


def load_evaluation(path: Path | str) -> Evaluation:
    """Load an orchestrator Evaluation from a YAML or JSON file."""
    return Evaluation.from_dict(_load_file(Path(path)))
