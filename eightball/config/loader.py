"""配置文件的读取和写入。"""

from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from eightball.config.schema import Config


def get_config_path() -> Path:
    """获取默认配置文件路径。"""
    return Path.home() / ".eightball" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    读取配置文件。文件不存在或内容无效时使用默认配置。
    
    参数：
        config_path：配置文件的可选路径。如果未提供，则使用默认路径。
    """
    path = config_path or get_config_path()
    if not path.exists():
        return Config()

    try:
        return Config.model_validate_json(path.read_text())
    except ValidationError as e:
        logger.warning(f"{path} 中的配置无效，使用默认配置：{e}")
        return Config()


def save_config(config: Config, config_path: Path | None = None) -> Path:
    """把配置以 camelCase 键写入文件，返回写入的路径。"""
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.model_dump_json(by_alias=True, indent=2))
    return path
