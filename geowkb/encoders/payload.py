"""Encoder for framed WKB payloads - CBOR metadata prefix + WKB."""

import struct
import cbor2
from typing import Any, Dict, Optional, Tuple

from .base import BaseEncoder, register_encoder
from .wkb import WkbEncoder
from ..access import GeometryAccess

# Big-endian uint32 metadata length
_LENGTH = struct.Struct('>I')


@register_encoder('wkb-payload')
class WkbPayloadEncoder(BaseEncoder):
    """
    Encodes a geometry as WKB with a CBOR metadata prefix.

    Lets a receiver route or index a geometry (kind, extent, size) without
    parsing the WKB itself.

    Format:
    [metadata_length (4 bytes, big-endian)]
    [metadata (CBOR)]
    [geometry (WKB)]
    """

    def __init__(self, include_bounds: bool = True, strict: bool = False,
                 access: Optional[GeometryAccess] = None):
        self.include_bounds = include_bounds
        self.wkb = WkbEncoder(strict=strict, access=access)

    def encode(self, geom: Any) -> bytes:
        """Encode geometry as a metadata-prefixed WKB frame."""
        wkb_bytes = self.wkb.encode(geom)

        metadata = self.get_metadata(geom)
        metadata['wkb_size'] = len(wkb_bytes)
        metadata_bytes = cbor2.dumps(metadata)

        # Pack: metadata_length + metadata + wkb
        return _LENGTH.pack(len(metadata_bytes)) + metadata_bytes + wkb_bytes

    def get_metadata(self, geom: Any) -> Dict[str, Any]:
        """Extract geometry metadata."""
        metadata = self.wkb.get_metadata(geom)
        if not self.include_bounds:
            metadata.pop('bounds', None)
        return metadata


def decode_payload(data: bytes) -> Tuple[Dict[str, Any], bytes]:
    """Split a payload frame into its metadata and WKB bytes."""
    if len(data) < _LENGTH.size:
        raise ValueError(f"Payload too short: {len(data)} bytes")

    (metadata_len,) = _LENGTH.unpack_from(data)
    end = _LENGTH.size + metadata_len
    if end > len(data):
        raise ValueError(
            f"Metadata length {metadata_len} exceeds payload size {len(data)}"
        )

    metadata = cbor2.loads(data[_LENGTH.size:end])
    if not isinstance(metadata, dict):
        raise ValueError(f"Payload metadata must be a map, got {type(metadata).__name__}")
    wkb_bytes = data[end:]

    if metadata.get('wkb_size', len(wkb_bytes)) != len(wkb_bytes):
        raise ValueError(
            f"WKB size mismatch: expected {metadata['wkb_size']}, got {len(wkb_bytes)}"
        )
    return metadata, wkb_bytes
