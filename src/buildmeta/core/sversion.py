"""语义化版本值。

对 semantic_version 的轻量封装：解析永不抛出异常，而是返回带有效性标记的值，
以便调用方检查"哪里"出错。

注意：semantic_version 没有类型存根。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import total_ordering
from typing import ClassVar

from semantic_version import Version  # type: ignore[import-untyped]

logger = logging.getLogger(__name__)

# 零版本："0.0.0-0"
ZERO_VERSION_TEXT = "0.0.0-0"


@total_ordering
@dataclass(frozen=True, eq=False, repr=False)
class SVersion:
    """解析后的语义化版本（可能无效）。

    属性：
        text：原始输入文本（可能为 None）
        parsed：解析得到的 semantic_version.Version；无效时为 None
        error_message：无效时的错误描述；有效时为 None
    """

    ZERO: ClassVar[SVersion]

    text: str | None
    parsed: Version | None = None
    error_message: str | None = None

    @classmethod
    def try_parse(cls, text: str | None) -> SVersion:
        """解析版本字符串，永不抛出异常。

        参数：
            text：版本字符串（不接受前导 "v"）

        返回：
            SVersion 实例；通过 is_valid_syntax 判断是否有效
        """
        if text is None or not text.strip():
            return cls(text, error_message="版本字符串为空")
        try:
            return cls(text, parsed=Version(text))
        except ValueError as exc:
            logger.debug("无效的语义化版本 %r：%s", text, exc)
            return cls(text, error_message=str(exc))

    @property
    def is_valid_syntax(self) -> bool:
        """版本字符串是否为合法的语义化版本。"""
        return self.parsed is not None

    @property
    def normalized_text(self) -> str | None:
        """规范化字符串；无效时返回原始文本。"""
        if self.parsed is None:
            return self.text
        return str(self.parsed)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SVersion):
            return NotImplemented
        if self.parsed is not None and other.parsed is not None:
            return self.parsed == other.parsed
        return self.parsed is None and other.parsed is None and self.text == other.text

    def __hash__(self) -> int:
        if self.parsed is not None:
            return hash(self.parsed)
        return hash(self.text)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SVersion):
            return NotImplemented
        if self.parsed is None or other.parsed is None:
            raise TypeError("无法比较无效的语义化版本")
        return self.parsed < other.parsed

    def __str__(self) -> str:
        return self.normalized_text or ""

    def __repr__(self) -> str:
        if self.parsed is None:
            return f"SVersion({self.text!r}, invalid)"
        return f"SVersion({self.text!r})"


SVersion.ZERO = SVersion.try_parse(ZERO_VERSION_TEXT)
