"""
展示层

包含用户交互界面：
- cli: 命令行界面 (Click + Rich)
"""

from .cli import run_cli

__all__ = ["run_cli"]
