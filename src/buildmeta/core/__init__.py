"""buildmeta 核心：质量等级、质量过滤器与 informational version。"""
