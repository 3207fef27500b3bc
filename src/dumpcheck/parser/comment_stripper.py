"""SQL 덤프 주석 제거기."""

import re

# 조건부 주석 패턴: /*!40101 SET ... */; (뒤따르는 구분자까지 제거)
CONDITIONAL_COMMENT_PATTERN = re.compile(r"/\*!.*?\*/;", re.DOTALL)

# 일반 블록 주석 패턴: /* ... */
BLOCK_COMMENT_PATTERN = re.compile(r"/\*.*?\*/", re.DOTALL)

# '#' 으로 시작하는 라인 주석
HASH_COMMENT_PATTERN = re.compile(r"^#.*$", re.MULTILINE)

# 연속된 빈 줄
BLANK_LINES_PATTERN = re.compile(r"\n{2,}")


class CommentStripper:
    """덤프 텍스트에서 주석을 제거하는 클래스.

    문자열 리터럴을 구분하지 않는 텍스트 기반 매칭이므로, 따옴표 안의
    '#' 이나 '/*' 도 주석 시작으로 처리된다.
    """

    def strip(self, sql_text: str) -> str:
        """주석을 제거하고 연속된 빈 줄을 하나의 줄바꿈으로 합친다.

        조건부 주석은 일반 블록 주석 패턴의 상위 집합이므로 먼저 제거해야 한다.

        Args:
            sql_text: 원본 덤프 텍스트

        Returns:
            주석이 제거된 텍스트
        """
        result = CONDITIONAL_COMMENT_PATTERN.sub("", sql_text)
        result = BLOCK_COMMENT_PATTERN.sub("", result)
        result = HASH_COMMENT_PATTERN.sub("", result)
        return BLANK_LINES_PATTERN.sub("\n", result)
