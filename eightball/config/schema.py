"""使用 Pydantic 的配置模式。"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict


class _CamelModel(BaseModel):
    """配置文件使用 camelCase 键，代码中使用 snake_case 字段名。"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RtmConfig(_CamelModel):
    """实时消息握手配置。"""
    api_base: str = "https://slack.com/api"
    start_method: str = "rtm.start"
    timeout: float = Field(default=30.0, gt=0)  # 握手请求超时（秒）


class BotConfig(_CamelModel):
    """机器人行为配置。"""
    max_pending_replies: int | None = Field(default=None, ge=1)  # None 表示不限制同时运行的回复任务
    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR"] = "INFO"


class Config(BaseSettings):
    """eightball 的根配置。会话令牌不保存在配置中。"""
    model_config = SettingsConfigDict(
        env_prefix="EIGHTBALL_",
        env_nested_delimiter="__",
    )

    rtm: RtmConfig = Field(default_factory=RtmConfig)
    bot: BotConfig = Field(default_factory=BotConfig)
