"""基础设施层：配置、依赖注入容器与外部适配器"""
