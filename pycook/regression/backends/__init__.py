"""
Regression backends.

Available backends:
    CPUSumsBackend: CPU reference implementation using weighted sums
"""

from pycook.regression.backends.cpu import CPUSumsBackend

__all__ = [
    "CPUSumsBackend",
]
