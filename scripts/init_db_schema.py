"""
데이터베이스 스키마 초기화 스크립트
----------------------------------
visits 테이블을 생성하거나 빠진 컬럼을 추가합니다.
"""

import sys
from pathlib import Path

# 환경 변수 로드
from dotenv import load_dotenv

# 프로젝트 루트의 .env 파일 로드
PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

# tastelog 모듈 import를 위해 경로 추가
sys.path.insert(0, str(PROJECT_ROOT))

from sqlalchemy import text  # noqa: E402

from tastelog import models  # noqa: F401,E402
from tastelog.db.init_db import init_db  # noqa: E402
from tastelog.db.session import engine  # noqa: E402


def init_db_schema() -> None:
    """데이터베이스 스키마 초기화."""
    print("🔧 데이터베이스 스키마 초기화 중...")
    init_db(engine)
    print("✅ 테이블 생성 완료")

    print("\n📋 visits 컬럼:")
    with engine.connect() as conn:
        result = conn.execute(text("""
            SELECT column_name, data_type
            FROM information_schema.columns
            WHERE table_schema = 'public' AND table_name = 'visits'
            ORDER BY ordinal_position
        """))
        for row in result:
            print(f"  - {row[0]} ({row[1]})")


if __name__ == "__main__":
    init_db_schema()
