"""Quote analytics: depth ladders and charts."""

from amm_pricing.analysis.charts import create_depth_chart, create_execution_price_chart
from amm_pricing.analysis.depth import LADDER_COLUMNS, depth_ladder, geometric_sizes

__all__ = [
    "LADDER_COLUMNS",
    "create_depth_chart",
    "create_execution_price_chart",
    "depth_ladder",
    "geometric_sizes",
]
