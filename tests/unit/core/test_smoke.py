"""스모크 테스트 - 프로젝트 설정 검증."""


def test_project_imports():
    """dumpcheck 패키지가 정상적으로 임포트되는지 확인한다."""
    import dumpcheck

    assert dumpcheck.__version__ == "0.1.0"


def test_core_module_imports():
    """core 모듈이 정상적으로 임포트되는지 확인한다."""
    from dumpcheck import core

    assert core is not None


def test_validate_entry_point_imports():
    """validate 진입점이 정상적으로 임포트되는지 확인한다."""
    from dumpcheck.validator import validate

    assert callable(validate)
