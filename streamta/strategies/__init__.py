"""streamta.strategies

Strategies fuse indicator outputs into signals. Importing this package
registers them.
"""

from streamta.strategies.hma_ema_crossover import HmaEmaCrossOver, HmaEmaCrossOverInstance
from streamta.strategies.hma_pivot_reversal import HMAPivotReversal, HMAPivotReversalInstance
from streamta.strategies.pivot_reversal import PivotReversalStrategy, PivotReversalStrategyInstance

__all__ = [
    "HmaEmaCrossOver",
    "HmaEmaCrossOverInstance",
    "HMAPivotReversal",
    "HMAPivotReversalInstance",
    "PivotReversalStrategy",
    "PivotReversalStrategyInstance",
]
