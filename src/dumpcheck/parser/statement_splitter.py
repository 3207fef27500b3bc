"""SQL 문 분리기."""

import re

DEFAULT_DELIMITER = ";"


class StatementSplitter:
    """주석이 제거된 덤프 텍스트를 개별 SQL 문으로 분리하는 클래스."""

    def __init__(self, delimiter: str = DEFAULT_DELIMITER) -> None:
        """분리기 초기화.

        Args:
            delimiter: SQL 문 구분자
        """
        if not delimiter:
            raise ValueError("delimiter must not be empty")
        self._delimiter = delimiter
        # 줄 끝에 위치한 구분자만 문장 종료로 인정
        self._pattern = re.compile(re.escape(delimiter) + r"$", re.MULTILINE)

    @property
    def delimiter(self) -> str:
        """SQL 문 구분자."""
        return self._delimiter

    def split(self, sql_text: str) -> list[str]:
        """텍스트를 SQL 문 리스트로 분리한다.

        Args:
            sql_text: 주석이 제거된 덤프 텍스트

        Returns:
            앞뒤 공백이 제거된 SQL 문 리스트 (마지막 빈 조각은 제외)
        """
        pieces = self._pattern.split(sql_text.replace("\r", ""))
        statements = [piece.strip() for piece in pieces]

        if statements and not statements[-1]:
            statements.pop()

        return statements
