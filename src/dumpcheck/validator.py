"""덤프 검증 파이프라인 오케스트레이터."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from dumpcheck.core.logger import get_logger
from dumpcheck.core.models import ExtractedFacts, Finding, Severity
from dumpcheck.parser.comment_stripper import CommentStripper
from dumpcheck.parser.fact_extractor import FactExtractor
from dumpcheck.parser.statement_splitter import DEFAULT_DELIMITER, StatementSplitter
from dumpcheck.rules.rule_engine import RuleEngine

logger = get_logger("validator")


class PipelineStage(Enum):
    """파이프라인 단계."""

    STRIPPING = "stripping"
    SPLITTING = "splitting"
    EXTRACTING = "extracting"
    EVALUATING = "evaluating"
    COMPLETED = "completed"


@dataclass
class ProgressInfo:
    """진행 상황 정보."""

    stage: PipelineStage
    current: int = 0
    total: int = 0
    message: str = ""


# 진행 상황 콜백 타입
ProgressCallback = Callable[[ProgressInfo], None]


@dataclass
class ValidationResult:
    """검증 실행 결과."""

    statement_count: int = 0
    facts: ExtractedFacts = field(default_factory=ExtractedFacts)
    findings: list[Finding] = field(default_factory=list)

    def count(self, severity: Severity) -> int:
        """심각도별 Finding 수."""
        return sum(1 for finding in self.findings if finding.severity == severity)

    @property
    def has_warnings(self) -> bool:
        """Warning 또는 Error 가 하나라도 있는지 여부."""
        return any(finding.severity != Severity.SUCCESS for finding in self.findings)


class DumpValidator:
    """주석 제거 → 문장 분리 → 정보 추출 → 규칙 평가 파이프라인."""

    def __init__(
        self,
        delimiter: str = DEFAULT_DELIMITER,
        comment_stripper: Optional[CommentStripper] = None,
        fact_extractor: Optional[FactExtractor] = None,
        rule_engine: Optional[RuleEngine] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> None:
        """파이프라인 초기화.

        Args:
            delimiter: SQL 문 구분자
            comment_stripper: 주석 제거기
            fact_extractor: 구조 정보 추출기
            rule_engine: 규칙 엔진
            progress_callback: 진행 상황 콜백 함수
        """
        self._comment_stripper = comment_stripper or CommentStripper()
        self._splitter = StatementSplitter(delimiter)
        self._fact_extractor = fact_extractor or FactExtractor()
        self._rule_engine = rule_engine or RuleEngine()
        self._progress_callback = progress_callback

    def _notify_progress(self, info: ProgressInfo) -> None:
        """진행 상황을 알림."""
        if self._progress_callback:
            self._progress_callback(info)

    def run(self, dump_text: str, multisite_confirmed: bool = False) -> ValidationResult:
        """덤프 텍스트를 검증한다.

        Args:
            dump_text: 덤프 원문
            multisite_confirmed: 멀티사이트 덤프 여부

        Returns:
            검증 결과
        """
        result = ValidationResult()

        # 1. 주석 제거
        self._notify_progress(ProgressInfo(
            stage=PipelineStage.STRIPPING,
            message="Removing comments...",
        ))
        cleaned = self._comment_stripper.strip(dump_text)

        # 2. 문장 분리
        self._notify_progress(ProgressInfo(
            stage=PipelineStage.SPLITTING,
            message="Splitting statements...",
        ))
        statements = self._splitter.split(cleaned)
        result.statement_count = len(statements)
        logger.debug("SQL 문 %d개 분리 (구분자 %r)", len(statements), self._splitter.delimiter)

        # 3. 구조 정보 추출
        self._notify_progress(ProgressInfo(
            stage=PipelineStage.EXTRACTING,
            total=len(statements),
            message="Extracting table facts...",
        ))
        result.facts = self._fact_extractor.extract_all(statements)

        # 4. 규칙 평가
        self._notify_progress(ProgressInfo(
            stage=PipelineStage.EVALUATING,
            total=len(statements),
            current=len(statements),
            message="Evaluating rules...",
        ))
        result.findings = self._rule_engine.evaluate(result.facts, multisite_confirmed)

        self._notify_progress(ProgressInfo(
            stage=PipelineStage.COMPLETED,
            message="Validation completed.",
        ))
        return result


def validate(
    dump_text: str,
    delimiter: str = DEFAULT_DELIMITER,
    multisite_confirmed: bool = False,
) -> list[Finding]:
    """덤프 텍스트를 검증하고 Finding 리스트를 반환한다.

    Args:
        dump_text: 덤프 원문
        delimiter: SQL 문 구분자
        multisite_confirmed: 멀티사이트 덤프 여부

    Returns:
        규칙 평가 순서대로 나열된 Finding 리스트
    """
    return DumpValidator(delimiter=delimiter).run(dump_text, multisite_confirmed).findings
