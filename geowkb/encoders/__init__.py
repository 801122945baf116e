"""Geometry encoders for binary serialization."""

from .base import BaseEncoder, get_encoder, register_encoder
from .wkb import WkbEncoder, encode
from .payload import WkbPayloadEncoder, decode_payload

__all__ = [
    'BaseEncoder',
    'get_encoder',
    'register_encoder',
    'WkbEncoder',
    'encode',
    'WkbPayloadEncoder',
    'decode_payload',
]
