"""eightball 的配置模块。"""

from eightball.config.loader import load_config, get_config_path
from eightball.config.schema import Config

__all__ = ["Config", "load_config", "get_config_path"]
