"""검증 결과 콘솔 출력."""

from typing import Any, Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from dumpcheck.core.models import Finding, Severity
from dumpcheck.validator import ValidationResult

SEVERITY_LABELS = {
    Severity.SUCCESS: ("Success", "green"),
    Severity.WARNING: ("Warning", "yellow"),
    Severity.ERROR: ("Error", "red"),
}


def format_cell(value: Any) -> str:
    """표 셀 값을 문자열로 변환. None은 빈 문자열."""
    if value is None:
        return ""
    return str(value)


class FindingReporter:
    """Finding 리스트를 rich 콘솔에 출력하는 클래스."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self._console = console or Console()

    def render(self, findings: Iterable[Finding]) -> None:
        """Finding 을 평가 순서대로 출력한다."""
        for finding in findings:
            self.render_finding(finding)

    def render_finding(self, finding: Finding) -> None:
        """Finding 하나를 출력한다.

        요약 한 줄, 상세 항목 목록, 표 데이터 순으로 출력한다.
        """
        label, style = SEVERITY_LABELS[finding.severity]
        self._console.print(f"[bold {style}]{label}:[/bold {style}] {escape(finding.summary)}")

        for detail in finding.details:
            self._console.print(f"  [{style}]-[/{style}] {escape(detail)}")

        if finding.is_tabular:
            self._console.print(self.build_table(finding))

    def build_table(self, finding: Finding) -> Table:
        """표 데이터를 rich Table 로 변환한다."""
        table = Table(show_header=True, header_style="bold magenta")
        for column in finding.columns:
            table.add_column(column)

        for row in finding.rows:
            table.add_row(*(escape(format_cell(row.get(column))) for column in finding.columns))

        return table

    def render_summary(self, result: ValidationResult) -> None:
        """심각도별 결과 수를 패널로 출력한다."""
        summary_table = Table(show_header=False, box=None)
        summary_table.add_column("항목", style="cyan")
        summary_table.add_column("값", style="yellow")

        summary_table.add_row("Statements", str(result.statement_count))
        for severity, (label, _) in SEVERITY_LABELS.items():
            summary_table.add_row(label, str(result.count(severity)))

        border_style = "yellow" if result.has_warnings else "green"
        self._console.print(Panel(
            summary_table,
            title="[bold blue]Validation summary[/bold blue]",
            border_style=border_style,
        ))
