"""
Engine Registry for selecting a volume engine per claim.

The registry maps volume type names to VolumeEngine instances. A claim
picks its engine through the volume type label; claims without one get
the registry's default engine.
"""

from typing import Optional

from volorch.engines.base import VolumeEngine
from volorch.errors import NilInputError, UnknownEngineError
from volorch.schemas import VolumeClaim

DEFAULT_ENGINE = "jiva"


class EngineRegistry:
    """
    Registry for engine lookup by volume type.

    Usage:
        registry = EngineRegistry()
        registry.register(JivaEngine())

        engine = registry.for_claim(claim)
        job = engine.synthesize(claim)

        # Or use factory with defaults
        registry = EngineRegistry.create_default()
    """

    def __init__(self, default_engine: str = DEFAULT_ENGINE) -> None:
        """
        Initialize an empty engine registry.

        Args:
            default_engine: Engine used for claims without a volume type
        """
        self._engines: dict[str, VolumeEngine] = {}
        self._default_engine = default_engine

    @property
    def default_engine(self) -> str:
        """Name of the engine used for untyped claims."""
        return self._default_engine

    def register(self, engine: VolumeEngine, name: Optional[str] = None) -> None:
        """
        Register an engine.

        Args:
            engine: Engine instance
            name: Volume type to register under, defaults to engine.name
        """
        self._engines[name or engine.name] = engine

    def get(self, name: str) -> VolumeEngine:
        """
        Get the engine for a volume type.

        Raises:
            UnknownEngineError: If no engine is registered under name
        """
        if name not in self._engines:
            raise UnknownEngineError(name, self.list_engines())
        return self._engines[name]

    def has(self, name: str) -> bool:
        """Check if an engine is registered for a volume type."""
        return name in self._engines

    def list_engines(self) -> list[str]:
        """List all registered volume types."""
        return list(self._engines.keys())

    def for_claim(self, claim: Optional[VolumeClaim]) -> VolumeEngine:
        """
        Select the engine for a claim.

        Raises:
            NilInputError: If claim is None
            UnknownEngineError: If the claim's volume type is not registered
        """
        if claim is None:
            raise NilInputError("claim", "Nil volume claim provided")
        return self.get(claim.volume_type or self._default_engine)

    @classmethod
    def create_default(cls, default_engine: str = DEFAULT_ENGINE) -> "EngineRegistry":
        """
        Create a registry with the built-in engines.

        Args:
            default_engine: Engine used for claims without a volume type

        Returns:
            Configured EngineRegistry
        """
        from volorch.engines.jiva import JivaEngine

        registry = cls(default_engine=default_engine)
        registry.register(JivaEngine())
        return registry
