"""buildmeta：包质量过滤与 informational version 的构建元数据工具。"""

from buildmeta.core.informational_version import (
    ZERO_ASSEMBLY_VERSION,
    ZERO_COMMIT_DATE,
    ZERO_COMMIT_SHA,
    ZERO_FILE_VERSION,
    ZERO_INFORMATIONAL_VERSION,
    InformationalVersion,
    build_informational_version,
)
from buildmeta.core.quality import PackageQuality
from buildmeta.core.quality_filter import UNBOUNDED, PackageQualityFilter
from buildmeta.core.sversion import ZERO_VERSION_TEXT, SVersion
from buildmeta.utils.logging_setup import setup_logging
from buildmeta.version import PACKAGE_VERSION

__version__ = PACKAGE_VERSION

__all__ = [
    "InformationalVersion",
    "PackageQuality",
    "PackageQualityFilter",
    "SVersion",
    "UNBOUNDED",
    "ZERO_ASSEMBLY_VERSION",
    "ZERO_COMMIT_DATE",
    "ZERO_COMMIT_SHA",
    "ZERO_FILE_VERSION",
    "ZERO_INFORMATIONAL_VERSION",
    "ZERO_VERSION_TEXT",
    "build_informational_version",
    "setup_logging",
]
