"""Cholesky factorisation and CSR triangle counting kernels, with timing helpers."""

__version__ = "0.1.0"
__all__ = ["cholesky", "timing", "triangles"]