"""덤프 검증 CLI.

사용법:
    dumpcheck --file dump.sql                  # 멀티사이트 여부를 실행 중에 확인
    dumpcheck --file dump.zip --no-multisite   # 단일 사이트 덤프
    dumpcheck --file dump.sql.gz --multisite   # 멀티사이트 덤프
"""

import argparse
import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm

from dumpcheck.adapters.dump_reader import DumpReader
from dumpcheck.cli.report import FindingReporter
from dumpcheck.core.config import Settings
from dumpcheck.core.errors import DumpCheckError, UserInputError
from dumpcheck.core.logger import configure_logging, get_logger
from dumpcheck.validator import DumpValidator, ProgressInfo

logger = get_logger("cli")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_ABORTED = 130

MULTISITE_QUESTION = "[yellow]Is the provided database for a multisite WordPress?[/yellow]"


def build_parser() -> argparse.ArgumentParser:
    """인자 파서 생성."""
    parser = argparse.ArgumentParser(
        prog="dumpcheck",
        description="WordPress SQL 덤프를 import 하기 전에 검증합니다.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예시:
  dumpcheck --file dump.sql
  dumpcheck --file dump.zip --no-multisite
  dumpcheck --file dump.sql.gz --multisite --delimiter ';'
        """,
    )
    parser.add_argument(
        "--file",
        default=None,
        help=".sql 파일 또는 .sql 파일 하나를 담은 .gz/.zip 아카이브",
    )
    parser.add_argument(
        "--delimiter",
        default=None,
        help="SQL 문 구분자 (기본값: 설정값, ';')",
    )
    parser.add_argument(
        "--multisite",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="멀티사이트 덤프 여부 (지정하지 않으면 실행 중에 확인)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="콘솔 로그 레벨 (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def ask_multisite(console: Console) -> bool:
    """멀티사이트 여부를 사용자에게 확인한다."""
    console.print()
    return Confirm.ask(MULTISITE_QUESTION, console=console, default=False)


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    """메인 함수.

    Args:
        argv: 명령행 인자 (None이면 sys.argv 사용)
        console: 출력 콘솔 (None이면 표준 출력)

    Returns:
        종료 코드
    """
    args = build_parser().parse_args(argv)
    console = console or Console()
    settings = Settings()
    configure_logging(args.log_level or settings.log_level, settings.log_file)

    try:
        if not args.file:
            raise UserInputError("Must have --file=my_sql_file attached")

        delimiter = args.delimiter if args.delimiter is not None else settings.delimiter
        if not delimiter:
            raise UserInputError("The delimiter must not be empty.")

        console.print(f"[green]📂 Reading dump:[/green] {escape(args.file)}")
        dump_text = DumpReader(encoding=settings.encoding).read(args.file)
    except DumpCheckError as e:
        logger.debug("입력 처리 실패: %s", e)
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        return EXIT_ERROR

    multisite = args.multisite if args.multisite is not None else settings.multisite
    if multisite is None:
        try:
            multisite = ask_multisite(console)
        except (KeyboardInterrupt, EOFError):
            console.print("\n[dim]Aborted.[/dim]")
            return EXIT_ABORTED

    with console.status("Validating...") as status:
        def update_status(info: ProgressInfo) -> None:
            status.update(info.message)

        validator = DumpValidator(delimiter=delimiter, progress_callback=update_status)
        result = validator.run(dump_text, multisite_confirmed=multisite)

    reporter = FindingReporter(console)
    reporter.render(result.findings)
    console.print()
    reporter.render_summary(result)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
