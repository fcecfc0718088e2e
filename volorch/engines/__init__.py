"""
volorch.engines - Volume engines and their registry.

Each engine lays out one storage engine's topology as an orchestrator
job. JivaEngine is the built-in default.
"""

from volorch.engines.base import VolumeEngine
from volorch.engines.jiva import JivaEngine
from volorch.engines.registry import DEFAULT_ENGINE, EngineRegistry

__all__ = [
    "VolumeEngine",
    "JivaEngine",
    "EngineRegistry",
    "DEFAULT_ENGINE",
]
