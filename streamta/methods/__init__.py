"""streamta.methods

Streaming methods: one input per step, one output per step.
"""

from streamta.methods.ema import EMA
from streamta.methods.hma import HMA
from streamta.methods.reversal import ReversalSignal
from streamta.methods.wma import WMA

__all__ = [
    "EMA",
    "HMA",
    "ReversalSignal",
    "WMA",
]
