"""Visit model."""

from sqlalchemy import BigInteger, Column, Date, DateTime, Integer, Numeric, Text, func
from sqlalchemy.dialects.postgresql import ARRAY

from tastelog.db.base import Base


class Visit(Base):
    """One logged visit to a place."""

    __tablename__ = "visits"

    id = Column(BigInteger, primary_key=True, autoincrement=True)
    place_name = Column(Text, nullable=False)
    category = Column(Text)
    visit_date = Column(Date)
    companions = Column(Text)  # 동행자
    menu = Column(Text)
    price = Column(Integer)
    rating_overall = Column(Numeric(2, 1))  # 0.0 ~ 5.0
    rating_taste = Column(Numeric(2, 1))
    rating_service = Column(Numeric(2, 1))
    rating_atmosphere = Column(Numeric(2, 1))
    tags = Column(ARRAY(Text))
    notes = Column(Text)
    address = Column(Text)
    phone = Column(Text)
    distance_m = Column(Integer)
    area = Column(Text)  # 동네 이름 (예: 성수동)
    image_data = Column(Text)  # 사진 JSON 배열 (예전 데이터는 문자열 한 개)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
