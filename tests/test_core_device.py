"""Tests for the core device abstraction."""

import pytest
import torch

import atomgraph as ag
from atomgraph.core.device import Device, default_device, device


class TestDevice:
    """Tests for Device class."""

    def test_device_creation(self):
        """Test Device can be created with all parameters."""
        dev = Device(
            name="test",
            torch_device=torch.device("cpu"),
            dtype=torch.float64,
        )
        assert dev.name == "test"
        assert dev.torch_device == torch.device("cpu")
        assert dev.dtype == torch.float64

    def test_device_default_dtype(self):
        """Test Device defaults to float32 entries."""
        dev = Device(name="cpu", torch_device=torch.device("cpu"))
        assert dev.dtype == torch.float32

    def test_device_repr(self):
        """Test Device __repr__."""
        dev = Device(name="cpu", torch_device=torch.device("cpu"))
        repr_str = repr(dev)
        assert "cpu" in repr_str
        assert "float32" in repr_str

    def test_as_torch_device(self):
        """Test as_torch_device returns correct device."""
        dev = Device(name="cpu", torch_device=torch.device("cpu"))
        assert dev.as_torch_device() == torch.device("cpu")


class TestDeviceFactory:
    """Tests for device factory function."""

    def test_device_cpu(self):
        """Test device('cpu') returns correct Device."""
        dev = device("cpu")
        assert dev.name == "cpu"
        assert dev.torch_device == torch.device("cpu")
        assert dev.dtype == torch.float32

    def test_device_dtype(self):
        """Test the dtype argument is passed through."""
        assert device("cpu", dtype=torch.float64).dtype == torch.float64

    def test_device_cuda_available(self):
        """Test device('cuda') when CUDA is available."""
        if torch.cuda.is_available():
            dev = device("cuda")
            assert dev.name == "cuda"
            assert dev.torch_device.type == "cuda"
        else:
            pytest.skip("CUDA not available")

    def test_device_cuda_unavailable(self):
        """Test device('cuda') raises when CUDA is unavailable."""
        if not torch.cuda.is_available():
            with pytest.raises(RuntimeError, match="CUDA device requested"):
                device("cuda")
        else:
            pytest.skip("CUDA is available, cannot test failure case")

    def test_device_unsupported_name(self):
        """Test device() raises for unsupported device name."""
        with pytest.raises(ValueError, match="Unsupported device name"):
            device("invalid_device")

    def test_default_device(self):
        """Test default_device returns the CPU device."""
        dev = default_device()
        assert dev.name == "cpu"
        assert dev.torch_device == torch.device("cpu")

    def test_reexported_from_package(self):
        """Test the device helpers are available at package level."""
        assert ag.device is device
        assert ag.default_device is default_device
        assert ag.Device is Device
