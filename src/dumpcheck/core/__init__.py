"""Core 모듈 - 데이터 모델, 설정, 에러, 로깅."""
