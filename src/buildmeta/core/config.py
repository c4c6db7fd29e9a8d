"""buildmeta 的配置管理。

该模块负责读写 buildmeta.yaml，为构建版本信息提供默认值（各类零值）
以及包质量过滤器设置。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from buildmeta.core.informational_version import (
    ZERO_ASSEMBLY_VERSION,
    ZERO_FILE_VERSION,
    ZERO_INFORMATIONAL_VERSION,
    InformationalVersion,
)
from buildmeta.core.quality_filter import PackageQualityFilter
from buildmeta.core.sversion import ZERO_VERSION_TEXT
from buildmeta.version import CONFIG_VERSION

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "buildmeta.yaml"


@dataclass
class BuildVersionConfig:
    """构建版本配置。

    属性：
        version：配置文件格式版本
        quality_filter：包质量过滤器字符串（空字符串表示不设限）
        sem_version：语义化版本
        assembly_version：程序集版本
        file_version：文件版本
        informational_version：informational version 字符串
    """

    version: str = CONFIG_VERSION
    quality_filter: str = ""
    sem_version: str = ZERO_VERSION_TEXT
    assembly_version: str = ZERO_ASSEMBLY_VERSION
    file_version: str = ZERO_FILE_VERSION
    informational_version: str = ZERO_INFORMATIONAL_VERSION

    def get_quality_filter(self) -> PackageQualityFilter:
        """解析配置中的质量过滤器。

        异常：
            ValueError：quality_filter 语法无效
        """
        return PackageQualityFilter.parse(self.quality_filter)

    def get_informational_version(self) -> InformationalVersion:
        """解析配置中的 informational version（不抛出异常）。"""
        return InformationalVersion.parse(self.informational_version)

    def to_dict(self) -> dict[str, Any]:
        """转换为字典以便 YAML 序列化。"""
        return {
            "version": self.version,
            "quality_filter": self.quality_filter,
            "sem_version": self.sem_version,
            "assembly_version": self.assembly_version,
            "file_version": self.file_version,
            "informational_version": self.informational_version,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BuildVersionConfig":
        """从 YAML 读取的字典创建实例（缺失字段使用零值）。"""
        return cls(
            version=str(data.get("version", CONFIG_VERSION)),
            quality_filter=data.get("quality_filter") or "",
            sem_version=data.get("sem_version", ZERO_VERSION_TEXT),
            assembly_version=data.get("assembly_version", ZERO_ASSEMBLY_VERSION),
            file_version=data.get("file_version", ZERO_FILE_VERSION),
            informational_version=data.get(
                "informational_version", ZERO_INFORMATIONAL_VERSION
            ),
        )


def load_config(config_path: Path) -> BuildVersionConfig:
    """从 YAML 文件加载配置。

    参数：
        config_path：buildmeta.yaml 文件路径

    返回：
        加载后的 BuildVersionConfig 实例（缺失字段使用默认值）

    异常：
        FileNotFoundError：配置文件不存在
        yaml.YAMLError：配置文件内容不合法
    """
    if not config_path.exists():
        raise FileNotFoundError(f"未找到配置文件：{config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.info("配置文件为空，使用默认值：%s", config_path)
        data = {}

    return BuildVersionConfig.from_dict(data)


def save_config(config: BuildVersionConfig, config_path: Path) -> None:
    """将配置保存到 YAML 文件。

    异常：
        OSError：无法写入文件
    """
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(
            config.to_dict(),
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
