"""搜索子包：分支定界与多执行者辅助。"""

from .actors import Actor, all_finished, canonical, lagging_actor, replace_actor
from .branch_bound import branch_and_bound, optimize

__all__ = [
    "Actor",
    "all_finished",
    "branch_and_bound",
    "canonical",
    "lagging_actor",
    "optimize",
    "replace_actor",
]
