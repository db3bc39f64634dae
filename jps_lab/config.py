# [关键] 全局配置定义

# jps_lab/config.py
from dataclasses import dataclass

@dataclass
class GlobalConfig:
    # 障碍阈值 = lethal_cost * inflation_factor
    lethal_cost: int = 253
    inflation_factor: float = 0.5
    map_resolution: float = 1.0
    # 是否把地图最外圈标成障碍 (防止路径贴边)
    outline_map: bool = True
    # 观察者模式: 'efficient' | 'experiment' | 'debug'
    observer_mode: str = "efficient"
    log_dir: str = "logs/planning_debug"

    @property
    def obstacle_threshold(self) -> float:
        return self.lethal_cost * self.inflation_factor
