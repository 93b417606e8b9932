"""Dense computation backends."""

from pynumerics.dense.backends.cpu import CPUDenseBackend

__all__ = ["CPUDenseBackend"]
