# jps_lab/planning/motions.py
from typing import List
from jps_lab.types import Motion

# 8-连通运动方向：先 4 个轴向，再 4 个斜向
# 顺序固定，影响同代价节点的入队顺序 (进而影响结果的可复现性)
MOTIONS: List[Motion] = [
    Motion(1, 0), Motion(0, 1), Motion(-1, 0), Motion(0, -1),
    Motion(1, 1), Motion(1, -1), Motion(-1, 1), Motion(-1, -1),
]


def split_diagonal(motion: Motion):
    """斜向运动 -> (水平分量, 竖直分量)"""
    return Motion(motion.dx, 0), Motion(0, motion.dy)
