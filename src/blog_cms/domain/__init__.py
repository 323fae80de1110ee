"""领域层：值对象、实体、领域事件、仓储协议与生命周期服务"""
