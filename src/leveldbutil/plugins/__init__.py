"""Decoder plugins and registry."""

from .builtins import HexDumpDecoder
from .registry import DecoderRegistry, create_default_registry

__all__ = ["DecoderRegistry", "HexDumpDecoder", "create_default_registry"]
