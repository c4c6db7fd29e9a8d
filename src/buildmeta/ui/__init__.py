"""buildmeta 的 UI 组件。"""

from buildmeta.ui.display import THEME, show_informational_version, show_quality_filter

__all__ = [
    "THEME",
    "show_informational_version",
    "show_quality_filter",
]
