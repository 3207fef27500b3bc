"""INSERT 문 값 튜플 파서."""

import re
from typing import Optional

from dumpcheck.core.models import InsertRecord

# INSERT INTO [db.]table 에서 테이블명 추출 (따옴표/백틱 허용)
INSERT_TABLE_PATTERN = re.compile(
    r"\bINSERT\s+(?:IGNORE\s+)?INTO\s+"
    r"(?:[`'\"]?[^\s`'\"(.,]+[`'\"]?\.)?"
    r"[`'\"]?([^\s`'\"(.,]+)[`'\"]?",
    re.IGNORECASE,
)

# 헤더 튜플에서 제거할 문자 (괄호, 따옴표, 백틱, 공백)
HEADER_STRIP_PATTERN = re.compile(r"[()'\"`\s]")

# 값 앞뒤에서 제거할 문자
VALUE_STRIP_CHARS = " \t\r\n'\"`"


def find_parenthesized_groups(text: str) -> list[str]:
    """텍스트에서 최상위 괄호 그룹을 모두 찾는다.

    깊이를 세면서 문자를 순회하므로 그룹 안의 중첩 괄호는 그룹에 포함된다.
    따옴표는 구분하지 않는다.

    Args:
        text: 검색할 텍스트

    Returns:
        괄호를 포함한 그룹 문자열 리스트 (등장 순서)

    Examples:
        >>> find_parenthesized_groups("VALUES (1,'a(b)'),(2,'c')")
        ["(1,'a(b)')", "(2,'c')"]
    """
    groups = []
    depth = 0
    start = 0

    for i, char in enumerate(text):
        if char == "(":
            if depth == 0:
                start = i
            depth += 1
        elif char == ")" and depth > 0:
            depth -= 1
            if depth == 0:
                groups.append(text[start:i + 1])

    return groups


class InsertRowParser:
    """INSERT 문을 컬럼명 기준 레코드로 변환하는 클래스.

    첫 번째 괄호 그룹을 컬럼 목록(헤더)으로 간주한다. 컬럼 목록 없이
    바로 값 튜플로 시작하는 INSERT 문은 첫 행이 헤더로 사용되어 결과에서
    빠진다. 덤프 생성 옵션에 따라 달라지는 부분이라 그대로 유지한다.
    """

    def target_table(self, statement: str) -> Optional[str]:
        """INSERT 문의 대상 테이블명을 반환한다.

        Args:
            statement: SQL 문

        Returns:
            테이블명 또는 INSERT 문이 아니면 None
        """
        match = INSERT_TABLE_PATTERN.search(statement)
        if not match:
            return None
        return match.group(1)

    def parse(self, statement: str, table: str) -> list[InsertRecord]:
        """INSERT 문을 레코드 리스트로 변환한다.

        Args:
            statement: SQL 문
            table: 대상 테이블명 (대소문자 구분)

        Returns:
            InsertRecord 리스트. 대상 테이블의 INSERT 문이 아니면 빈 리스트
        """
        if self.target_table(statement) != table:
            return []

        groups = find_parenthesized_groups(statement)
        if not groups:
            return []

        header = HEADER_STRIP_PATTERN.sub("", groups[0]).split(",")

        records = []
        for group in groups[1:]:
            values = [value.strip(VALUE_STRIP_CHARS) for value in group[1:-1].split(",")]
            fields = {
                column: values[idx] if idx < len(values) else None
                for idx, column in enumerate(header)
            }
            records.append(InsertRecord(table=table, fields=fields))

        return records
