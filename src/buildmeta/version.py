"""buildmeta 版本常量（集中管理）。"""

from __future__ import annotations

__version__ = "0.1.0"
PACKAGE_VERSION = __version__
CONFIG_VERSION = "1.0"

UI_VERSION_INFO = f"v{PACKAGE_VERSION}"
