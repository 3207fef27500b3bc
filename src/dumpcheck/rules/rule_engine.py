"""덤프 적합성 규칙 엔진.

추출된 구조 정보를 바탕으로 아래 규칙을 순서대로 평가한다.
- R01: 테이블 접두사 (wp_)
- R02: CREATE TABLE / DROP TABLE 짝 맞춤
- R03: charset (utf8mb4 권장)
- R04-R05: 코어 테이블 DROP/CREATE 누락
- R06: CREATE/DROP DATABASE 문
- R07: wp_options siteurl/home
- R08-R09: 멀티사이트 테이블 DROP/CREATE 누락 (멀티사이트 확인 시)
- R10: wp_blogs domain/path (멀티사이트 확인 시)

각 규칙은 독립적으로 실행되며, 앞 규칙의 결과가 뒤 규칙 실행을 막지 않는다.
"""

from typing import Callable, Sequence

from dumpcheck.core.logger import get_logger
from dumpcheck.core.models import ExtractedFacts, Finding, Severity, TableOperation
from dumpcheck.rules.reference_tables import (
    BLOGS_COLUMNS,
    CORE_TABLES,
    KNOWN_CHARSETS,
    LEGACY_CHARSETS,
    MULTISITE_TABLES,
    OPTIONS_COLUMNS,
    RECOMMENDED_CHARSET,
    SITE_URL_OPTIONS,
)

logger = get_logger("rule_engine")

Rule = Callable[[ExtractedFacts], list[Finding]]


class RuleEngine:
    """규칙 모음 및 평가기."""

    def evaluate(
        self, facts: ExtractedFacts, multisite_confirmed: bool = False
    ) -> list[Finding]:
        """모든 규칙을 순서대로 평가한다.

        Args:
            facts: 추출된 구조 정보 (읽기 전용)
            multisite_confirmed: 멀티사이트 덤프 여부 (True일 때만 멀티사이트 규칙 실행)

        Returns:
            규칙 평가 순서대로 나열된 Finding 리스트
        """
        rules: list[Rule] = [
            self.check_prefix,
            self.check_matching_drop,
            self.check_charset,
            self.check_core_drop_tables,
            self.check_core_create_tables,
            self.check_database_statements,
            self.check_options_entries,
        ]
        if multisite_confirmed:
            rules.extend([
                self.check_multisite_drop_tables,
                self.check_multisite_create_tables,
                self.check_blogs_entries,
            ])

        findings: list[Finding] = []
        for rule in rules:
            findings.extend(rule(facts))

        logger.debug("규칙 %d개 평가, 결과 %d건", len(rules), len(findings))
        return findings

    # ================================================================
    # R01: 테이블 접두사
    # ================================================================
    def check_prefix(self, facts: ExtractedFacts) -> list[Finding]:
        """wp_ 접두사가 없는 DROP/CREATE TABLE 문 확인"""
        findings = []

        for fact in facts.drop_tables + facts.create_tables:
            if fact.has_wp_prefix:
                continue
            findings.append(Finding(
                severity=Severity.WARNING,
                summary=f"We have found a {fact.operation.value} TABLE statement with a custom prefix.",
                details=(fact.raw_name,),
            ))

        if not findings:
            findings.append(Finding(
                severity=Severity.SUCCESS,
                summary="All DROP TABLE and CREATE TABLE statements use the wp_ prefix.",
            ))

        return findings

    # ================================================================
    # R02: DROP / CREATE 짝 맞춤
    # ================================================================
    def check_matching_drop(self, facts: ExtractedFacts) -> list[Finding]:
        """CREATE TABLE 마다 같은 이름의 DROP TABLE 이 있는지 확인"""
        drop_names = {fact.raw_name for fact in facts.drop_tables}
        findings = [
            Finding(
                severity=Severity.WARNING,
                summary=f"There is a missing drop statement for {fact.raw_name}",
            )
            for fact in facts.create_tables
            if fact.raw_name not in drop_names
        ]

        if not findings:
            findings.append(Finding(
                severity=Severity.SUCCESS,
                summary="Every CREATE TABLE statement has a matching DROP TABLE statement.",
            ))

        return findings

    # ================================================================
    # R03: charset
    # ================================================================
    def check_charset(self, facts: ExtractedFacts) -> list[Finding]:
        """utf8mb4 사용 여부 및 변환이 필요한 charset 확인"""
        findings = []
        charsets = [charset.lower() for charset in facts.charsets]

        if RECOMMENDED_CHARSET in charsets:
            findings.append(Finding(
                severity=Severity.SUCCESS,
                summary="We have found some UTF8MB4 charsets.",
            ))
        else:
            findings.append(Finding(
                severity=Severity.WARNING,
                summary="We have not found any UTF8MB4 charset, please check your SQL file.",
            ))

        for original, charset in zip(facts.charsets, charsets):
            if charset in LEGACY_CHARSETS:
                findings.append(Finding(
                    severity=Severity.WARNING,
                    summary=f"We have found a {original} charset that should be converted to UTF8MB4.",
                ))

        custom = [
            original
            for original, charset in zip(facts.charsets, charsets)
            if charset not in KNOWN_CHARSETS
        ]
        if custom:
            findings.append(Finding(
                severity=Severity.WARNING,
                summary="We have found some custom charset, please check your SQL file.",
                details=tuple(custom),
            ))

        return findings

    # ================================================================
    # R04-R05: 코어 테이블
    # ================================================================
    def check_core_drop_tables(self, facts: ExtractedFacts) -> list[Finding]:
        """코어 테이블 DROP TABLE 문 누락 확인"""
        return self._check_coverage(
            facts.wp_drop_names, CORE_TABLES, TableOperation.DROP, "core"
        )

    def check_core_create_tables(self, facts: ExtractedFacts) -> list[Finding]:
        """코어 테이블 CREATE TABLE 문 누락 확인"""
        return self._check_coverage(
            facts.wp_create_names, CORE_TABLES, TableOperation.CREATE, "core"
        )

    # ================================================================
    # R06: DATABASE 문
    # ================================================================
    def check_database_statements(self, facts: ExtractedFacts) -> list[Finding]:
        """CREATE/DROP DATABASE 문 확인"""
        if not facts.database_statements:
            return [Finding(
                severity=Severity.SUCCESS,
                summary="There is no DATABASE statement.",
            )]

        return [Finding(
            severity=Severity.WARNING,
            summary="We have found some unwanted DATABASE statements.",
            details=tuple(facts.database_statements),
        )]

    # ================================================================
    # R07: wp_options
    # ================================================================
    def check_options_entries(self, facts: ExtractedFacts) -> list[Finding]:
        """wp_options 의 siteurl, home 항목 표시"""
        if not facts.options_entries:
            return [Finding(
                severity=Severity.WARNING,
                summary="Unable to find the wp_options table.",
            )]

        rows = tuple(
            dict(record.fields)
            for record in facts.options_entries
            if record.get("option_name") in SITE_URL_OPTIONS
        )
        return [Finding(
            severity=Severity.SUCCESS,
            summary=f"We have found {len(rows)} siteurl/home entries.",
            columns=OPTIONS_COLUMNS,
            rows=rows,
        )]

    # ================================================================
    # R08-R09: 멀티사이트 테이블
    # ================================================================
    def check_multisite_drop_tables(self, facts: ExtractedFacts) -> list[Finding]:
        """멀티사이트 테이블 DROP TABLE 문 누락 확인"""
        return self._check_coverage(
            facts.wp_drop_names, MULTISITE_TABLES, TableOperation.DROP, "multisite"
        )

    def check_multisite_create_tables(self, facts: ExtractedFacts) -> list[Finding]:
        """멀티사이트 테이블 CREATE TABLE 문 누락 확인"""
        return self._check_coverage(
            facts.wp_create_names, MULTISITE_TABLES, TableOperation.CREATE, "multisite"
        )

    # ================================================================
    # R10: wp_blogs
    # ================================================================
    def check_blogs_entries(self, facts: ExtractedFacts) -> list[Finding]:
        """wp_blogs 항목 표시 및 domain/path 누락 확인 (항목이 없으면 빈 표)"""
        findings = [Finding(
            severity=Severity.SUCCESS,
            summary=f"We have found {len(facts.blogs_entries)} wp_blogs entries.",
            columns=BLOGS_COLUMNS,
            rows=tuple(dict(record.fields) for record in facts.blogs_entries),
        )]

        for record in facts.blogs_entries:
            blog_id = record.get("blog_id")
            if not record.get("domain"):
                findings.append(Finding(
                    severity=Severity.WARNING,
                    summary=f"No domain set up for blog_id {blog_id}",
                ))
            if not record.get("path"):
                findings.append(Finding(
                    severity=Severity.WARNING,
                    summary=f"No path set up for blog_id {blog_id}",
                ))

        return findings

    def _check_coverage(
        self,
        names: Sequence[str],
        reference: Sequence[str],
        operation: TableOperation,
        scope: str,
    ) -> list[Finding]:
        """기준 테이블 목록 대비 누락된 테이블을 확인한다.

        Args:
            names: 덤프에서 발견된 wp_ 테이블명
            reference: 기준 테이블 목록
            operation: DROP 또는 CREATE
            scope: 메시지에 표시할 범위 ('core', 'multisite')

        Returns:
            Finding 1건 리스트
        """
        found = set(names)
        missing = tuple(table for table in reference if table not in found)

        if not names:
            return [Finding(
                severity=Severity.WARNING,
                summary=f"There is no {operation.value} TABLE statement for {scope} tables.",
                details=missing,
            )]

        if missing:
            return [Finding(
                severity=Severity.WARNING,
                summary=f"Missing {scope} {operation.value.lower()} statement:",
                details=missing,
            )]

        return [Finding(
            severity=Severity.SUCCESS,
            summary=f"We have found all required {operation.value} TABLE statements for {scope} tables.",
        )]
