"""
Shared compute infrastructure for PyCook.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/.

Submodules:
    timing: Execution timing utilities
"""

from pycook.core.compute.timing import Timer

__all__ = [
    "Timer",
]
