"""streamta.indicators

Named, validated indicator configs. Importing this package registers them.
"""

from streamta.indicators.hull_moving_average import HullMovingAverage, HullMovingAverageInstance
from streamta.indicators.pivot_reversal import PivotReversal, PivotReversalInstance

__all__ = [
    "HullMovingAverage",
    "HullMovingAverageInstance",
    "PivotReversal",
    "PivotReversalInstance",
]
