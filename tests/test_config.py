import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from eightball.config.loader import load_config, save_config
from eightball.config.schema import BotConfig, Config, RtmConfig


# 测试默认配置
def test_defaults() -> None:
    config = Config()
    assert config.rtm.api_base == "https://slack.com/api"
    assert config.rtm.start_method == "rtm.start"
    assert config.rtm.timeout == 30.0
    assert config.bot.max_pending_replies is None
    assert config.bot.log_level == "INFO"


# 测试无效的取值被拒绝
def test_validation() -> None:
    with pytest.raises(ValidationError):
        BotConfig(max_pending_replies=0)
    with pytest.raises(ValidationError):
        RtmConfig(timeout=0)
    with pytest.raises(ValidationError):
        BotConfig(log_level="LOUD")


# 测试环境变量覆盖
def test_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EIGHTBALL_BOT__MAX_PENDING_REPLIES", "5")
    monkeypatch.setenv("EIGHTBALL_RTM__API_BASE", "http://localhost:9000/api")

    config = Config()
    assert config.bot.max_pending_replies == 5
    assert config.rtm.api_base == "http://localhost:9000/api"


# 测试保存后再加载，文件使用 camelCase 键
def test_save_and_load(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    config = Config(bot=BotConfig(max_pending_replies=8, log_level="DEBUG"))

    assert save_config(config, path) == path

    data = json.loads(path.read_text())
    assert data["bot"]["maxPendingReplies"] == 8
    assert data["rtm"]["startMethod"] == "rtm.start"

    loaded = load_config(path)
    assert loaded.bot.max_pending_replies == 8
    assert loaded.bot.log_level == "DEBUG"


# 测试缺失或无效的配置文件回退到默认值
def test_load_fallback(tmp_path: Path) -> None:
    assert load_config(tmp_path / "missing.json").bot.max_pending_replies is None

    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    assert load_config(bad).rtm.start_method == "rtm.start"

    invalid = tmp_path / "invalid.json"
    invalid.write_text(json.dumps({"bot": {"maxPendingReplies": -1}}))
    assert load_config(invalid).bot.max_pending_replies is None


# 测试手写的 camelCase 配置文件
def test_load_camel_case_file(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "rtm": {"apiBase": "http://localhost:9000/api", "startMethod": "rtm.connect"},
        "bot": {"maxPendingReplies": 4},
    }))

    config = load_config(path)
    assert config.rtm.api_base == "http://localhost:9000/api"
    assert config.rtm.start_method == "rtm.connect"
    assert config.bot.max_pending_replies == 4
    assert config.bot.log_level == "INFO"
