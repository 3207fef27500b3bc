#!/usr/bin/env python
"""덤프 검증 실행 스크립트.

사용법:
    python scripts/validate_dump.py --file dump.sql
    python scripts/validate_dump.py --file dump.zip --no-multisite
    python scripts/validate_dump.py --file samples/wordpress_dump.sql --no-multisite
"""

import sys
from pathlib import Path

# 프로젝트 루트 경로 추가
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from dumpcheck.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
