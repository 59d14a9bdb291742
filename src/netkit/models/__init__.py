"""Netkit configuration models."""

from .config import ByteSize, ClientConfig, TransportConfig

__all__ = [
    "ByteSize",
    "ClientConfig",
    "TransportConfig",
]
