"""包质量范围过滤器。

过滤器的字符串形式为 "Min-Max"。默认情况下过滤器接受所有真实等级：
Min 为 None 等同于 CI，Max 为 None 等同于 Release。

示例：
    "Release"（等同于 "Release-Release"）：只接受 Release
    "CI-Release"（等同于 "-Release"、"CI-" 或 ""）：接受全部
    "-ReleaseCandidate"（等同于 "CI-ReleaseCandidate"）：除 Release 外全部接受
    "Exploratory-Preview"：不接受 CI、ReleaseCandidate 与 Release
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from buildmeta.core.quality import REAL_QUALITIES, PackageQuality

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class PackageQualityFilter:
    """由最小、最大质量等级构成的不可变过滤器。

    属性：
        min：最小质量等级（None 等同于 CI）
        max：最大质量等级（None 等同于 Release）
    """

    min: PackageQuality = PackageQuality.NONE
    max: PackageQuality = PackageQuality.NONE

    def __post_init__(self) -> None:
        # 构造时保证 min <= max，必要时交换
        if self.min > self.max:
            low, high = self.max, self.min
            object.__setattr__(self, "min", low)
            object.__setattr__(self, "max", high)

    @property
    def has_min(self) -> bool:
        """min 是否有效（既不是 None 也不是 CI）。"""
        return self.min.is_real and not self.min.is_floor

    @property
    def has_max(self) -> bool:
        """max 是否有效（既不是 None 也不是 Release）。"""
        return self.max.is_real and not self.max.is_ceiling

    def accepts(self, quality: PackageQuality) -> bool:
        """判断该过滤器是否接受指定的质量等级。

        参数：
            quality：要检查的等级，None 永远不被接受

        返回：
            是否接受
        """
        return (
            quality.is_real
            and (not self.has_min or quality >= self.min)
            and (not self.has_max or quality <= self.max)
        )

    def accepted_qualities(self) -> list[PackageQuality]:
        """按从低到高的顺序返回被接受的真实等级。"""
        return [q for q in REAL_QUALITIES if self.accepts(q)]

    @classmethod
    def parse(cls, text: str | None) -> PackageQualityFilter:
        """解析过滤器字符串（严格模式）。

        参数：
            text：过滤器字符串，可以为 None 或空白

        返回：
            解析得到的过滤器；None 或空白返回不设限的过滤器

        异常：
            ValueError：语法无效
        """
        if text is None or not text.strip():
            return cls()
        result = cls.try_parse(text)
        if result is None:
            raise ValueError(f"无效的 PackageQualityFilter 语法：{text!r}")
        return result

    @classmethod
    def try_parse(cls, text: str | None) -> PackageQualityFilter | None:
        """尝试解析过滤器字符串，语法无效时返回 None（不抛出异常）。"""
        if text is None:
            return cls()

        tokens = "".join(text.split()).split("-")

        if len(tokens) == 1:
            only = tokens[0]
            if not only:
                return cls()
            both = PackageQuality.try_parse(only)
            if both is not None:
                return cls(both, both)
        elif len(tokens) == 2:
            low = _parse_bound(tokens[0], PackageQuality.CI)
            high = _parse_bound(tokens[1], PackageQuality.RELEASE)
            if low is not None and high is not None:
                return cls(low, high)

        logger.debug("无法解析质量过滤器：%r", text)
        return None

    def __str__(self) -> str:
        return f"{self.min}-{self.max}"

    def __repr__(self) -> str:
        return f"PackageQualityFilter({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackageQualityFilter):
            return NotImplemented
        same_min = (not self.has_min and not other.has_min) or self.min == other.min
        same_max = (not self.has_max and not other.has_max) or self.max == other.max
        return same_min and same_max

    def __hash__(self) -> int:
        low = self.min.rank << 8 if self.has_min else 0
        high = self.max.rank if self.has_max else 0
        return low | high


def _parse_bound(token: str, default: PackageQuality) -> PackageQuality | None:
    """解析单个边界，空字符串使用默认值。"""
    if not token:
        return default
    return PackageQuality.try_parse(token)


# 接受所有真实等级的过滤器
UNBOUNDED = PackageQualityFilter()
