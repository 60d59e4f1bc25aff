"""核心类型与通用工具。"""

from .types import (
    BnBResult,
    Coord,
    NegativeEdgeCostError,
    PathResult,
    SearchConfig,
    SearchLimitError,
    SearchStats,
    Unreachable,
)
from .path_utils import orthogonal_neighbors, reconstruct_path

__all__ = [
    "BnBResult",
    "Coord",
    "NegativeEdgeCostError",
    "PathResult",
    "SearchConfig",
    "SearchLimitError",
    "SearchStats",
    "Unreachable",
    "orthogonal_neighbors",
    "reconstruct_path",
]
