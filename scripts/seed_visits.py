"""
샘플 방문 기록 생성 스크립트
--------------------------
1. 기존 방문 기록 전체 삭제
2. 네이버 지역 검색으로 동네 맛집 수집
3. 맛집마다 1~3개의 랜덤 방문 기록 생성

사용법:
  python scripts/seed_visits.py
  python scripts/seed_visits.py --area 연남동 --max-places 5
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from datetime import date, timedelta
from pathlib import Path

# 환경 변수 로드
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

# tastelog 모듈 import를 위해 경로 추가
sys.path.insert(0, str(PROJECT_ROOT))

from sqlalchemy import delete  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from tastelog.db.init_db import init_db  # noqa: E402
from tastelog.db.session import SessionLocal  # noqa: E402
from tastelog.models.visit import Visit  # noqa: E402
from tastelog.schemas.place import PlaceCandidate  # noqa: E402
from tastelog.services.naver_search import NaverLocalSearch  # noqa: E402

SAMPLE_NOTES = [
    "정말 맛있어요! 또 올게요 👍",
    "분위기가 좋고 음식도 맛있었어요",
    "친구랑 갔는데 모두 만족했어요",
    "가격 대비 양이 푸짐해요",
    "직원분들이 친절해서 기분 좋았어요",
    "재방문 의사 100%! 강추합니다",
    "웨이팅이 좀 있지만 그만한 가치가 있어요",
    "데이트 코스로 추천해요 💕",
    "혼밥하기에도 좋은 곳이에요",
    "점심 특선이 가성비 최고!",
    "저녁에 와인 한 잔 하기 좋아요",
    "디저트까지 완벽했어요",
    "인테리어가 예뻐서 사진 찍기 좋아요",
    "주차가 편해서 좋았어요",
    "배달보다 매장에서 먹는 게 더 맛있어요",
]

SAMPLE_TAGS = [
    ["맛집", "분위기좋은"],
    ["가성비", "푸짐한"],
    ["데이트", "분위기좋은"],
    ["혼밥", "빠른식사"],
    ["점심특선", "직장인"],
    ["주차가능", "넓은"],
    ["인스타감성", "예쁜"],
    ["재방문", "단골"],
]

SAMPLE_COMPANIONS = ["혼자", "친구", "연인", "가족", "동료"]

QUERY_SUFFIXES = ["맛집", "한식", "카페", "양식", "일식"]


def random_visit_date(days: int = 90) -> date:
    """최근 `days`일 안의 랜덤 날짜."""
    return date.today() - timedelta(days=random.randint(0, days))


def random_rating() -> float:
    """3.5 ~ 5.0 (0.1 단위)."""
    return random.randint(35, 50) / 10


def collect_places(client: NaverLocalSearch, area: str, max_places: int) -> list[PlaceCandidate]:
    """검색어 여러 개로 수집하고 이름 기준으로 중복 제거."""
    places: dict[str, PlaceCandidate] = {}
    for suffix in QUERY_SUFFIXES:
        query = f"{area} {suffix}"
        print(f"   🔎 \"{query}\" 검색 중...")
        for place in client.search(query, display=5).items:
            places.setdefault(place.name, place)
        time.sleep(0.2)  # API 호출 간격
    return list(places.values())[:max_places]


def seed(db: Session, places: list[PlaceCandidate], area: str) -> int:
    total = 0
    for place in places:
        count = random.randint(1, 3)
        print(f"🍽️  {place.name} ({place.category}) - {count}개 기록 생성")
        for _ in range(count):
            visit = Visit(
                place_name=place.name,
                category=place.category,
                visit_date=random_visit_date(),
                companions=random.choice(SAMPLE_COMPANIONS),
                rating_overall=random_rating(),
                notes=random.choice(SAMPLE_NOTES),
                tags=list(random.choice(SAMPLE_TAGS)),
                address=place.address or "",
                phone=place.phone,
                area=area,
            )
            db.add(visit)
            print(f"   📅 {visit.visit_date} | ⭐ {visit.rating_overall} | \"{visit.notes[:20]}...\"")
            total += 1
    db.commit()
    return total


def main() -> None:
    parser = argparse.ArgumentParser(description="네이버 검색 결과로 샘플 방문 기록 생성")
    parser.add_argument("--area", default="성수동", help="검색할 동네 (기본: 성수동)")
    parser.add_argument("--max-places", type=int, default=10, help="최대 맛집 수 (기본: 10)")
    args = parser.parse_args()

    client = NaverLocalSearch.from_settings()
    if not client.configured:
        raise SystemExit("NAVER_CLIENT_ID / NAVER_CLIENT_SECRET 을 .env 에 설정해주세요.")

    init_db()
    db = SessionLocal()
    try:
        print("🗑️  1단계: 기존 방문 기록 전체 삭제...")
        db.execute(delete(Visit))
        db.commit()

        print(f"🔍 2단계: 네이버 API로 {args.area} 맛집 검색...")
        places = collect_places(client, args.area, args.max_places)
        print(f"✅ {len(places)}개 맛집 수집 완료!\n")

        print("📝 3단계: 방문 기록 생성...\n")
        total = seed(db, places, args.area)

        print("\n" + "=" * 60)
        print("샘플 데이터 생성 완료")
        print("=" * 60)
        print(f"  맛집: {len(places)}개")
        print(f"  기록: {total}개")
        print("=" * 60)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
