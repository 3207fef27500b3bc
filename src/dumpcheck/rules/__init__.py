"""스키마 적합성 규칙 모듈."""

from dumpcheck.rules.rule_engine import RuleEngine

__all__ = ["RuleEngine"]
