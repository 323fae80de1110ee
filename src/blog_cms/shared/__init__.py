"""共享模块：常量、异常与通用工具"""
