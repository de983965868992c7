"""Device abstraction for exporting graph matrices as tensors."""

from __future__ import annotations

import torch


class Device:
    """
    Represents a logical target device for tensor exports.

    Pairs a PyTorch device with the floating-point dtype used for matrix
    entries. Attributes should not be modified after construction.
    """

    def __init__(
        self,
        name: str,
        torch_device: torch.device,
        dtype: torch.dtype = torch.float32,
    ) -> None:
        """
        Initialize a Device.

        Args:
            name: Logical device name ("cpu" or "cuda").
            torch_device: Underlying PyTorch device.
            dtype: Floating-point dtype for matrix entries.
        """
        self.name = name
        self.torch_device = torch_device
        self.dtype = dtype

    def __repr__(self) -> str:
        return (
            f"Device(name={self.name!r}, torch_device={self.torch_device}, "
            f"dtype={self.dtype})"
        )

    def as_torch_device(self) -> torch.device:
        """Return the underlying PyTorch device."""
        return self.torch_device


def device(name: str, dtype: torch.dtype = torch.float32) -> Device:
    """
    Create a Device instance from a device name.

    Supported device names:
        - "cpu": host memory
        - "cuda": default CUDA device (only if CUDA is available)

    Args:
        name: Device name string.
        dtype: Floating-point dtype for exported matrices.

    Returns:
        A Device instance.

    Raises:
        RuntimeError: If "cuda" is requested but CUDA is not available.
        ValueError: If the device name is not supported.
    """
    if name == "cpu":
        return Device(name="cpu", torch_device=torch.device("cpu"), dtype=dtype)
    elif name == "cuda":
        if not torch.cuda.is_available():
            raise RuntimeError(
                "CUDA device requested but torch.cuda.is_available() is False"
            )
        return Device(name="cuda", torch_device=torch.device("cuda"), dtype=dtype)
    else:
        supported = ["cpu", "cuda"]
        raise ValueError(
            f"Unsupported device name: {name!r}. Supported devices: {supported}"
        )


def default_device() -> Device:
    """Return the default (CPU) device."""
    return device("cpu")
