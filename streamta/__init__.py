"""streamta — streaming technical analysis.

One bar in, a bounded batch of values and signals out. No history re-scan.
"""

from __future__ import annotations

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
