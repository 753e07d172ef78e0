"""
eightball 的入口点，作为模块运行：python -m eightball
"""

from eightball.cli.commands import app

if __name__ == "__main__":
    app()
