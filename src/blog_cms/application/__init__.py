"""应用层

应用层负责用例编排，协调领域层和基础设施层。

包含：
- ports: 出站端口定义
- commands: 命令与命令处理器
- queries: 查询与查询处理器
- dto: 网关请求与响应
- gateway: 中间件管道与处理器
"""

from . import commands, dto, gateway, ports, queries

__all__ = [
    "commands",
    "dto",
    "gateway",
    "ports",
    "queries",
]
