"""Core 설정 모듈 테스트."""


class TestSettingsDefaults:
    """기본값 적용 테스트."""

    def test_parsing_defaults(self):
        """파싱 설정의 기본값이 올바르게 적용되어야 한다."""
        from dumpcheck.core.config import Settings

        settings = Settings()

        assert settings.delimiter == ";"
        assert settings.encoding == "utf-8"

    def test_multisite_default_is_unset(self):
        """멀티사이트 여부는 기본적으로 지정되지 않아야 한다."""
        from dumpcheck.core.config import Settings

        settings = Settings()

        assert settings.multisite is None

    def test_logging_defaults(self):
        """로깅 설정의 기본값이 올바르게 적용되어야 한다."""
        from dumpcheck.core.config import Settings

        settings = Settings()

        assert settings.log_level == "WARNING"
        assert settings.log_file is None


class TestSettingsFromEnv:
    """환경변수에서 설정 로드 테스트."""

    def test_load_delimiter_from_env(self, monkeypatch):
        """환경변수에서 구분자를 로드할 수 있어야 한다."""
        monkeypatch.setenv("DUMPCHECK_DELIMITER", "$$")

        from dumpcheck.core.config import Settings

        settings = Settings()

        assert settings.delimiter == "$$"

    def test_load_multisite_from_env(self, monkeypatch):
        """환경변수에서 멀티사이트 여부를 로드할 수 있어야 한다."""
        monkeypatch.setenv("DUMPCHECK_MULTISITE", "true")

        from dumpcheck.core.config import Settings

        settings = Settings()

        assert settings.multisite is True

    def test_load_log_settings_from_env(self, monkeypatch):
        """환경변수에서 로깅 설정을 로드할 수 있어야 한다."""
        monkeypatch.setenv("DUMPCHECK_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("DUMPCHECK_LOG_FILE", "/tmp/dumpcheck.log")

        from dumpcheck.core.config import Settings

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.log_file == "/tmp/dumpcheck.log"


class TestSettingsFields:
    """설정 필드 정의 테스트."""

    def test_fields_have_descriptions(self):
        """모든 설정 필드에 설명이 있어야 한다."""
        from dumpcheck.core.config import Settings

        for name, field in Settings.model_fields.items():
            assert field.description, name
