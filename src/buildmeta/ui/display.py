"""基于 Rich 的版本信息展示组件。"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from buildmeta.core.informational_version import InformationalVersion, format_commit_date
from buildmeta.core.quality import REAL_QUALITIES
from buildmeta.core.quality_filter import PackageQualityFilter
from buildmeta.core.sversion import SVersion

# 主题配置
THEME = {
    "valid": "green",
    "invalid": "red",
    "missing": "dim",
}


def _validity(valid: bool) -> str:
    if valid:
        return f"[{THEME['valid']}]√[/{THEME['valid']}]"
    return f"[{THEME['invalid']}]×[/{THEME['invalid']}]"


def _version_cell(raw: str | None, version: SVersion | None) -> tuple[str, str]:
    if raw is None or version is None:
        return f"[{THEME['missing']}]-[/{THEME['missing']}]", ""
    return escape(raw), _validity(version.is_valid_syntax)


def show_informational_version(console: Console, info: InformationalVersion) -> None:
    """以表格展示 informational version 的各字段及其有效性。

    参数：
        console: Rich 控制台实例
        info: 要展示的 informational version
    """
    table = Table(title=escape(str(info)), show_header=True, header_style="bold cyan")
    table.add_column("字段", style="cyan")
    table.add_column("值")
    table.add_column("有效", justify="center")

    table.add_row("SemVersion", *_version_cell(info.raw_sem_version, info.sem_version))
    table.add_row("NuGetVersion", *_version_cell(info.raw_nuget_version, info.nuget_version))
    if info.commit_sha is None:
        table.add_row("CommitSha", f"[{THEME['missing']}]-[/{THEME['missing']}]", "")
    else:
        table.add_row("CommitSha", escape(info.commit_sha), "")
    table.add_row("CommitDate", format_commit_date(info.commit_date), "")

    console.print(table)
    console.print(f"[cyan]语法有效：[/cyan] {_validity(info.is_valid_syntax)}")


def show_quality_filter(console: Console, quality_filter: PackageQualityFilter) -> None:
    """展示质量过滤器的范围以及每个等级是否被接受。"""
    table = Table(title=str(quality_filter), show_header=True, header_style="bold cyan")
    table.add_column("质量等级", style="cyan")
    table.add_column("接受", justify="center")

    for quality in REAL_QUALITIES:
        table.add_row(quality.value, _validity(quality_filter.accepts(quality)))

    console.print(table)
