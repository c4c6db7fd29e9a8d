"""包质量等级。

质量等级是一个有序刻度：CI < Exploratory < Preview < ReleaseCandidate < Release，
另有哨兵值 None 表示"未指定"。
"""

from __future__ import annotations

from enum import Enum


class PackageQuality(Enum):
    """包的质量等级（值即为等级名称，区分大小写）。"""

    NONE = "None"
    CI = "CI"
    EXPLORATORY = "Exploratory"
    PREVIEW = "Preview"
    RELEASE_CANDIDATE = "ReleaseCandidate"
    RELEASE = "Release"

    @property
    def rank(self) -> int:
        """显式排序值，NONE 位于所有真实等级之下。"""
        return _RANKS[self]

    @property
    def is_real(self) -> bool:
        """是否为真实等级（非 NONE）。"""
        return self is not PackageQuality.NONE

    @property
    def is_floor(self) -> bool:
        """是否为最低的真实等级（CI）。"""
        return self is PackageQuality.CI

    @property
    def is_ceiling(self) -> bool:
        """是否为最高的真实等级（Release）。"""
        return self is PackageQuality.RELEASE

    @classmethod
    def try_parse(cls, text: str) -> PackageQuality | None:
        """按名称精确匹配等级，失败时返回 None（不抛出异常）。"""
        try:
            return cls(text)
        except ValueError:
            return None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PackageQuality):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PackageQuality):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PackageQuality):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PackageQuality):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self) -> str:
        return self.value


_RANKS: dict[PackageQuality, int] = {
    PackageQuality.NONE: 0,
    PackageQuality.CI: 1,
    PackageQuality.EXPLORATORY: 2,
    PackageQuality.PREVIEW: 3,
    PackageQuality.RELEASE_CANDIDATE: 4,
    PackageQuality.RELEASE: 5,
}

# 真实等级，按从低到高排序
REAL_QUALITIES: tuple[PackageQuality, ...] = tuple(
    q for q in sorted(PackageQuality, key=lambda q: q.rank) if q.is_real
)
