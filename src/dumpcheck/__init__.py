"""WordPress SQL 덤프 사전 검증 도구."""

__version__ = "0.1.0"
