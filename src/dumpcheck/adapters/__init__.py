"""외부 입력 어댑터 모듈."""
