"""
服务模块包
"""
