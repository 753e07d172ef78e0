"""eightball 的 CLI 命令。"""

import asyncio
import sys
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from eightball import __version__, __logo__

app = typer.Typer(
    name="eightball",
    help=f"{__logo__} eightball - 魔力 8 号球聊天机器人",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} eightball v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
):
    """eightball - 魔力 8 号球聊天机器人。"""
    pass


def _setup_logging(level: str) -> None:
    """把 loguru 的输出重定向到标准错误。"""
    logger.remove()
    logger.add(sys.stderr, level=level)


# ============================================================================
# Onboard / Setup
# ============================================================================


@app.command()
def onboard():
    """初始化 eightball 配置。"""
    from eightball.config.loader import get_config_path, save_config
    from eightball.config.schema import Config
    
    config_path = get_config_path()
    
    if config_path.exists():
        console.print(f"[yellow]配置已存在于 {config_path}[/yellow]")
        if not typer.confirm("覆盖？"):
            raise typer.Exit()
    
    save_config(Config(), config_path)
    console.print(f"[green]✓[/green] 已在 {config_path} 创建配置")
    console.print(f"\n{__logo__} eightball 已就绪！")
    console.print("\n运行：[cyan]eightball run <会话令牌>[/cyan]")


# ============================================================================
# Bot
# ============================================================================


@app.command()
def run(
    token: str = typer.Argument(..., help="聊天服务的会话令牌"),
    config_path: Path = typer.Option(None, "--config", "-c", help="配置文件路径"),
    verbose: bool = typer.Option(False, "--verbose", help="详细输出"),
):
    """连接到聊天服务并回答提及机器人的问题。"""
    from eightball.bot.runner import run_bot
    from eightball.config.loader import load_config
    from eightball.rtm.errors import StartupError
    
    config = load_config(config_path)
    _setup_logging("DEBUG" if verbose else config.bot.log_level)
    
    try:
        asyncio.run(run_bot(token, config))
    except StartupError as e:
        logger.error(f"启动失败：{e}")
        err_console.print(f"[red]错误：{e}[/red]")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n正在关闭...")


# ============================================================================
# Status
# ============================================================================


@app.command()
def status(
    config_path: Path = typer.Option(None, "--config", "-c", help="配置文件路径"),
):
    """显示 eightball 的有效配置。"""
    from eightball.config.loader import get_config_path, load_config

    path = config_path or get_config_path()
    config = load_config(path)

    table = Table(title=f"{__logo__} eightball 状态")
    table.add_column("设置", style="cyan")
    table.add_column("值", style="green")

    table.add_row("配置文件", f"{path}" if path.exists() else f"[dim]{path}（不存在）[/dim]")
    table.add_row("握手地址", f"{config.rtm.api_base.rstrip('/')}/{config.rtm.start_method}")
    table.add_row("握手超时", f"{config.rtm.timeout:g} 秒")
    max_pending = config.bot.max_pending_replies
    table.add_row("回复任务上限", str(max_pending) if max_pending else "不限制")
    table.add_row("日志级别", config.bot.log_level)

    console.print(table)


if __name__ == "__main__":
    app()
