"""Core abstractions shared across atomgraph."""

from .device import Device, default_device, device

__all__ = ["Device", "device", "default_device"]
