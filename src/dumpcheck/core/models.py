"""Core 데이터 모델 정의."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


WP_PREFIX = "wp_"


class TableOperation(Enum):
    """테이블 DDL 연산 타입."""

    DROP = "DROP"
    CREATE = "CREATE"


class Severity(Enum):
    """검증 결과 심각도."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class TableFact:
    """DROP/CREATE TABLE 문에서 추출한 테이블 정보."""

    operation: TableOperation
    raw_name: str

    @property
    def has_wp_prefix(self) -> bool:
        """테이블명에 wp_ 접두사가 포함되어 있는지 여부."""
        return WP_PREFIX in self.raw_name


@dataclass
class InsertRecord:
    """INSERT 문의 값 튜플 하나를 컬럼명 기준으로 매핑한 레코드."""

    table: str
    fields: dict[str, Optional[str]] = field(default_factory=dict)

    def get(self, column: str) -> Optional[str]:
        """컬럼 값을 조회. 컬럼이 없으면 None."""
        return self.fields.get(column)


@dataclass(frozen=True)
class Finding:
    """규칙 하나의 평가 결과.

    columns/rows는 표 형태로 출력할 데이터가 있는 규칙(options, blogs)만 채운다.
    """

    severity: Severity
    summary: str
    details: tuple[str, ...] = ()
    columns: tuple[str, ...] = ()
    rows: tuple[dict[str, Any], ...] = ()

    @property
    def is_tabular(self) -> bool:
        """표 데이터를 가지고 있는지 여부."""
        return bool(self.columns)


@dataclass
class ExtractedFacts:
    """추출 단계에서 누적되는 구조 정보.

    추출 패스 하나가 단독으로 채우며, 이후 규칙 엔진은 읽기만 한다.
    """

    drop_tables: list[TableFact] = field(default_factory=list)
    create_tables: list[TableFact] = field(default_factory=list)
    charsets: list[str] = field(default_factory=list)
    database_statements: list[str] = field(default_factory=list)
    options_entries: list[InsertRecord] = field(default_factory=list)
    blogs_entries: list[InsertRecord] = field(default_factory=list)

    @property
    def wp_drop_names(self) -> list[str]:
        """wp_ 접두사가 있는 DROP TABLE 테이블명."""
        return [fact.raw_name for fact in self.drop_tables if fact.has_wp_prefix]

    @property
    def wp_create_names(self) -> list[str]:
        """wp_ 접두사가 있는 CREATE TABLE 테이블명."""
        return [fact.raw_name for fact in self.create_tables if fact.has_wp_prefix]

    @property
    def table_fact_count(self) -> int:
        """DROP/CREATE 테이블 정보 총 개수."""
        return len(self.drop_tables) + len(self.create_tables)
