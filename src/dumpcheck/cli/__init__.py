"""커맨드라인 호스트 모듈."""
