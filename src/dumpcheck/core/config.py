"""애플리케이션 설정 모듈.

pydantic-settings를 사용하여 환경 변수(DUMPCHECK_*) 및 .env 파일에서 설정을 로드합니다.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """애플리케이션 설정."""

    # 덤프 파싱 설정
    delimiter: str = Field(default=";", description="SQL 문 구분자")
    encoding: str = Field(default="utf-8", description="덤프 디코딩 인코딩")

    # 멀티사이트 여부 (None이면 실행 시 확인 프롬프트 표시)
    multisite: Optional[bool] = Field(default=None, description="멀티사이트 덤프 여부")

    # 로깅 설정
    log_level: str = Field(default="WARNING", description="콘솔 로그 레벨")
    log_file: Optional[str] = Field(default=None, description="로그 파일 경로")

    model_config = {
        "env_prefix": "DUMPCHECK_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
