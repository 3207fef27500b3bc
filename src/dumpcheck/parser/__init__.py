"""덤프 파싱 모듈."""

from dumpcheck.parser.comment_stripper import CommentStripper
from dumpcheck.parser.fact_extractor import FactExtractor
from dumpcheck.parser.row_parser import InsertRowParser
from dumpcheck.parser.statement_splitter import StatementSplitter

__all__ = ["CommentStripper", "FactExtractor", "InsertRowParser", "StatementSplitter"]
