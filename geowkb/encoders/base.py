"""Base encoder class and registry."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Type


class BaseEncoder(ABC):
    """Base class for geometry encoders."""

    @abstractmethod
    def encode(self, geom: Any) -> bytes:
        """Encode a geometry to bytes."""
        pass

    @abstractmethod
    def get_metadata(self, geom: Any) -> Dict[str, Any]:
        """Summarize a geometry (kind, size, extent)."""
        pass


# Registry of encoders by format name
_encoder_registry: Dict[str, Type[BaseEncoder]] = {}


def register_encoder(name: str):
    """Decorator to register an encoder for a format name."""
    def decorator(cls: Type[BaseEncoder]):
        _encoder_registry[name.lower()] = cls
        return cls
    return decorator


def get_encoder(name: str = 'wkb', **options) -> BaseEncoder:
    """Get an encoder instance for a format name.

    Options are forwarded to the encoder constructor. Unknown names fall
    back to plain WKB.
    """
    key = name.lower()
    if key in _encoder_registry:
        return _encoder_registry[key](**options)

    # Default to WKB encoder
    from .wkb import WkbEncoder
    return WkbEncoder(**options)
