"""검증 결과 콘솔 출력 테스트."""

import io

from rich.console import Console

from dumpcheck.core.models import Finding, Severity


def make_console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


class TestFormatCell:
    """표 셀 변환 테스트."""

    def test_none_is_empty(self):
        """None은 빈 문자열로 변환해야 한다."""
        from dumpcheck.cli.report import format_cell

        assert format_cell(None) == ""
        assert format_cell(3) == "3"


class TestFindingReporter:
    """Finding 출력 테스트."""

    def test_render_summary_and_details(self):
        """요약과 상세 항목을 출력해야 한다."""
        from dumpcheck.cli.report import FindingReporter

        console = make_console()
        finding = Finding(
            severity=Severity.WARNING,
            summary="Missing core drop statement:",
            details=("wp_users", "wp_links"),
        )

        FindingReporter(console).render([finding])
        output = console.file.getvalue()

        assert "Warning: Missing core drop statement:" in output
        assert "- wp_users" in output
        assert "- wp_links" in output

    def test_render_table(self):
        """표 데이터가 있으면 컬럼과 값을 출력해야 한다."""
        from dumpcheck.cli.report import FindingReporter

        console = make_console()
        finding = Finding(
            severity=Severity.SUCCESS,
            summary="We have found 1 siteurl/home entries.",
            columns=("option_name", "option_value"),
            rows=({"option_name": "siteurl", "option_value": "https://example.com"},),
        )

        FindingReporter(console).render([finding])
        output = console.file.getvalue()

        assert "Success: We have found 1 siteurl/home entries." in output
        assert "option_value" in output
        assert "https://example.com" in output

    def test_build_table_with_missing_value(self):
        """값이 없는 셀은 빈 문자열로 채워야 한다."""
        from dumpcheck.cli.report import FindingReporter

        finding = Finding(
            severity=Severity.SUCCESS,
            summary="We have found 1 wp_blogs entries.",
            columns=("blog_id", "domain"),
            rows=({"blog_id": "1", "domain": None},),
        )

        table = FindingReporter(make_console()).build_table(finding)

        assert len(table.columns) == 2
        assert table.row_count == 1

    def test_markup_in_summary_is_escaped(self):
        """요약의 대괄호는 rich 마크업으로 해석하지 않아야 한다."""
        from dumpcheck.cli.report import FindingReporter

        console = make_console()
        finding = Finding(
            severity=Severity.WARNING,
            summary="We have found a DROP TABLE statement with a custom prefix.",
            details=("[bold]posts",),
        )

        FindingReporter(console).render([finding])

        assert "[bold]posts" in console.file.getvalue()

    def test_render_summary_panel(self):
        """심각도별 개수를 요약 패널로 출력해야 한다."""
        from dumpcheck.cli.report import FindingReporter
        from dumpcheck.validator import ValidationResult

        console = make_console()
        result = ValidationResult(
            statement_count=4,
            findings=[
                Finding(Severity.SUCCESS, "ok"),
                Finding(Severity.WARNING, "warn"),
                Finding(Severity.WARNING, "warn again"),
            ],
        )

        FindingReporter(console).render_summary(result)
        output = console.file.getvalue()

        assert "Validation summary" in output
        assert "Statements" in output
        assert "Warning" in output
