"""SQL 문에서 구조 정보를 추출하는 모듈."""

import re
from typing import Iterable, Optional

from dumpcheck.core.logger import get_logger
from dumpcheck.core.models import ExtractedFacts, TableFact, TableOperation
from dumpcheck.parser.row_parser import INSERT_TABLE_PATTERN, InsertRowParser

logger = get_logger("fact_extractor")

# DDL은 문장 안 어디에서든 인식하되, INSERT 키워드 이후 구간은 검색하지 않음
DROP_TABLE_PATTERN = re.compile(
    r"\bDROP\s+TABLE\s+(?:IF\s+EXISTS\s+)?([^;\n]+)",
    re.IGNORECASE,
)

CREATE_TABLE_PATTERN = re.compile(
    r"\bCREATE\s+(?:TEMPORARY\s+)?TABLE\s+(?:IF\s+NOT\s+EXISTS\s+)?([^(\n]+?)\s*\(",
    re.IGNORECASE,
)

# CHARSET=utf8mb4 또는 CHARSET utf8mb4
CHARSET_PATTERN = re.compile(r"CHARSET(?:=|\s+)(\w+)", re.IGNORECASE)

DATABASE_STATEMENT_PATTERN = re.compile(
    r"\b(?:CREATE|DROP)\s+DATABASE\b",
    re.IGNORECASE,
)

# 테이블명 앞뒤에서 제거할 문자
NAME_STRIP_CHARS = " \t\r\n'\"`"

OPTIONS_TABLE = "wp_options"
BLOGS_TABLE = "wp_blogs"


def clean_table_name(raw_name: str) -> str:
    """테이블명 앞뒤의 공백과 따옴표/백틱을 제거한다."""
    return raw_name.strip(NAME_STRIP_CHARS)


def split_table_names(raw_names: str) -> list[str]:
    """쉼표로 나열된 테이블명 목록을 정리된 이름 리스트로 변환한다.

    Examples:
        >>> split_table_names("`wp_a`, `wp_b`")
        ['wp_a', 'wp_b']
    """
    names = (clean_table_name(name) for name in raw_names.split(","))
    return [name for name in names if name]

class FactExtractor:
    """SQL 문을 분류하고 구조 정보를 누적하는 클래스."""

    def __init__(self, row_parser: Optional[InsertRowParser] = None) -> None:
        """추출기 초기화.

        Args:
            row_parser: INSERT 문 파서 (None이면 기본 파서 사용)
        """
        self._row_parser = row_parser or InsertRowParser()

    def extract_all(self, statements: Iterable[str]) -> ExtractedFacts:
        """SQL 문 전체를 한 번 순회하며 구조 정보를 추출한다.

        Args:
            statements: SQL 문 리스트

        Returns:
            누적된 구조 정보
        """
        facts = ExtractedFacts()
        for statement in statements:
            self.extract(statement, facts)

        logger.debug(
            "추출 완료: drop=%d, create=%d, charset=%d, database=%d, options=%d, blogs=%d",
            len(facts.drop_tables),
            len(facts.create_tables),
            len(facts.charsets),
            len(facts.database_statements),
            len(facts.options_entries),
            len(facts.blogs_entries),
        )
        return facts

    def extract(self, statement: str, facts: ExtractedFacts) -> None:
        """SQL 문 하나에서 구조 정보를 추출해 누적기에 추가한다.

        하나의 SQL 문이 여러 규칙에 동시에 해당할 수 있다. DDL과 DATABASE 문은
        INSERT 키워드 앞부분에서만 찾으므로 INSERT 값 안의 문자열은 무시된다.

        Args:
            statement: SQL 문
            facts: 누적기
        """
        insert_match = INSERT_TABLE_PATTERN.search(statement)
        ddl_end = insert_match.start() if insert_match else len(statement)

        drop_match = DROP_TABLE_PATTERN.search(statement, 0, ddl_end)
        if drop_match:
            for name in split_table_names(drop_match.group(1)):
                facts.drop_tables.append(TableFact(TableOperation.DROP, name))

        create_match = CREATE_TABLE_PATTERN.search(statement, 0, ddl_end)
        if create_match:
            name = clean_table_name(create_match.group(1))
            if name:
                facts.create_tables.append(TableFact(TableOperation.CREATE, name))

            charset_match = CHARSET_PATTERN.search(statement, create_match.start(), ddl_end)
            if charset_match:
                facts.charsets.append(charset_match.group(1))

        if DATABASE_STATEMENT_PATTERN.search(statement, 0, ddl_end):
            facts.database_statements.append(statement)

        table = self._row_parser.target_table(statement)
        if table == OPTIONS_TABLE:
            facts.options_entries.extend(self._row_parser.parse(statement, table))
        elif table == BLOGS_TABLE:
            facts.blogs_entries.extend(self._row_parser.parse(statement, table))
