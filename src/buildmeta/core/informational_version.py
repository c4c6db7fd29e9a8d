"""标准 informational version 的解析与构建。

标准格式：
    <语义化版本> (<NuGet 版本>) - SHA1: <40 位十六进制> - CommitDate: <UTC 日期>

解析永不抛出异常：无法匹配或部分无效的字符串仍会生成实例，
通过 is_valid_syntax 与各字段检查具体哪一部分有问题。
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import ClassVar

from buildmeta.core.sversion import ZERO_VERSION_TEXT, SVersion

logger = logging.getLogger(__name__)

_INFORMATIONAL_VERSION_RE = re.compile(
    r"^(?P<sem>.*?) \((?P<nuget>.*?)\) - SHA1: (?P<sha>.*?) - CommitDate: (?P<date>.*?)$"
)
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_COMMIT_DATE_FORMAT = "%Y-%m-%d %H:%M:%SZ"

# 零值，可作为构建配置中的默认值
ZERO_ASSEMBLY_VERSION = "0.0.0"
ZERO_FILE_VERSION = "0.0.0.0"
ZERO_COMMIT_SHA = "0" * 40
ZERO_COMMIT_DATE = datetime.min.replace(tzinfo=timezone.utc)
ZERO_INFORMATIONAL_VERSION = (
    f"{ZERO_VERSION_TEXT} ({ZERO_VERSION_TEXT}) - SHA1: {ZERO_COMMIT_SHA}"
    " - CommitDate: 0001-01-01 00:00:00Z"
)


def is_hex_sha(text: str | None) -> bool:
    """是否为 40 位十六进制字符串。"""
    return text is not None and len(text) == 40 and all(c in _HEX_DIGITS for c in text)


def is_utc(value: datetime) -> bool:
    """datetime 是否明确标记为 UTC（naive 或本地时区均不算）。"""
    if value.tzinfo is None:
        return False
    return value.utcoffset() == timedelta(0) and value.tzname() in ("UTC", "Z")


def format_commit_date(value: datetime) -> str:
    """以可排序、与区域设置无关的格式输出 UTC 日期（精确到秒）。"""
    # strftime 对小于 1000 的年份不补零，这里手动格式化
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}Z"
    )


def parse_commit_date(text: str) -> datetime | None:
    """解析提交日期，失败时返回 None。

    先尝试标准格式 "YYYY-MM-DD HH:MM:SSZ"，再尝试 ISO 8601。
    无时区信息的结果视为 UTC，带时区的结果转换为 UTC。
    """
    value = text.strip()
    if not value:
        return None
    try:
        return datetime.strptime(value, _COMMIT_DATE_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        pass
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except (OverflowError, ValueError):
        return None


def build_informational_version(
    sem_ver: str,
    nuget_ver: str,
    commit_sha: str,
    commit_date_utc: datetime,
) -> str:
    """构建标准 informational version 字符串。

    参数：
        sem_ver：语义化版本，不能为空（不做语法校验）
        nuget_ver：NuGet 版本，不能为空（不做语法校验）
        commit_sha：提交的 SHA1（必须为 40 位十六进制）
        commit_date_utc：提交日期（必须为 UTC）
            只保留到秒，小于一秒的部分会被截断，解析结果不会包含微秒

    返回：
        informational version 字符串

    异常：
        ValueError：任一参数不满足要求
    """
    if not sem_ver or not sem_ver.strip():
        raise ValueError("sem_ver 不能为空")
    if not nuget_ver or not nuget_ver.strip():
        raise ValueError("nuget_ver 不能为空")
    if not is_hex_sha(commit_sha):
        raise ValueError("commit_sha 必须为 40 位十六进制字符串")
    if not is_utc(commit_date_utc):
        raise ValueError("commit_date_utc 必须为 UTC 日期")
    return (
        f"{sem_ver} ({nuget_ver}) - SHA1: {commit_sha}"
        f" - CommitDate: {format_commit_date(commit_date_utc)}"
    )


@dataclass(frozen=True)
class InformationalVersion:
    """解析标准 informational version，提取两个 SVersion、提交 SHA 与提交日期。

    使用 InformationalVersion.parse() 从字符串创建实例。

    属性：
        original_text：原始字符串（可能为 None）
        raw_sem_version：提取出的语义化版本字符串；格式不标准时为 None
        sem_version：解析后的 raw_sem_version（可能无效）；格式不标准时为 None
        raw_nuget_version：提取出的 NuGet 版本字符串；格式不标准时为 None
        nuget_version：解析后的 raw_nuget_version（可能无效）；格式不标准时为 None
        commit_sha：提取出的 SHA1；格式不标准时为 None
        commit_date：提取出的提交日期（UTC）；无法解析时为 ZERO_COMMIT_DATE
        is_valid_syntax：两个版本均有效、SHA1 为 40 位十六进制且日期解析成功
    """

    ZERO: ClassVar[InformationalVersion]

    original_text: str | None = None
    raw_sem_version: str | None = None
    sem_version: SVersion | None = None
    raw_nuget_version: str | None = None
    nuget_version: SVersion | None = None
    commit_sha: str | None = None
    commit_date: datetime = ZERO_COMMIT_DATE
    is_valid_syntax: bool = False

    @classmethod
    def parse(cls, informational_version: str | None) -> InformationalVersion:
        """解析 informational version 字符串，永不抛出异常。

        参数：
            informational_version：informational version，可以为 None

        返回：
            InformationalVersion 实例；通过 is_valid_syntax 判断是否完全有效
        """
        if informational_version is None:
            return cls()

        match = _INFORMATIONAL_VERSION_RE.match(informational_version)
        if match is None:
            logger.debug("非标准的 informational version：%r", informational_version)
            return cls(original_text=informational_version)

        raw_sem_version = match.group("sem")
        raw_nuget_version = match.group("nuget")
        commit_sha = match.group("sha")
        sem_version = SVersion.try_parse(raw_sem_version)
        nuget_version = SVersion.try_parse(raw_nuget_version)
        commit_date = parse_commit_date(match.group("date"))

        is_valid_syntax = (
            sem_version.is_valid_syntax
            and nuget_version.is_valid_syntax
            and is_hex_sha(commit_sha)
            and commit_date is not None
        )
        if not is_valid_syntax:
            logger.debug("informational version 部分无效：%r", informational_version)

        return cls(
            original_text=informational_version,
            raw_sem_version=raw_sem_version,
            sem_version=sem_version,
            raw_nuget_version=raw_nuget_version,
            nuget_version=nuget_version,
            commit_sha=commit_sha,
            commit_date=commit_date if commit_date is not None else ZERO_COMMIT_DATE,
            is_valid_syntax=is_valid_syntax,
        )

    def __str__(self) -> str:
        if self.original_text is None:
            return "[null OriginalInformationalVersion]"
        return self.original_text


InformationalVersion.ZERO = InformationalVersion(
    original_text=ZERO_INFORMATIONAL_VERSION,
    raw_sem_version=ZERO_VERSION_TEXT,
    sem_version=SVersion.ZERO,
    raw_nuget_version=ZERO_VERSION_TEXT,
    nuget_version=SVersion.ZERO,
    commit_sha=ZERO_COMMIT_SHA,
    commit_date=ZERO_COMMIT_DATE,
    is_valid_syntax=True,
)
