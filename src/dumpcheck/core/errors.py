"""덤프 검증 에러 정의.

파싱/규칙 평가 단계에는 치명적 에러가 없다. 아래 에러는 모두 입력 파일을
읽는 단계에서 발생하며 CLI가 한 번 출력하고 실행을 종료한다.
"""


class DumpCheckError(Exception):
    """dumpcheck 에러의 기본 클래스."""

    pass


class UserInputError(DumpCheckError):
    """잘못된 사용자 입력 (파일 인자 누락, 지원하지 않는 확장자, 아카이브 내 .sql 개수 오류)."""

    pass


class DumpFileError(DumpCheckError):
    """덤프 파일을 찾을 수 없거나 읽을 수 없음."""

    pass


class ArchiveExtractionError(DumpCheckError):
    """아카이브 압축 해제 실패."""

    pass
