"""Pydantic schemas for visits."""

from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from tastelog.services.images import MAX_IMAGES, decode_image_payload, encode_images

Rating = Optional[float]

# visits.price, visits.distance_m 는 INTEGER 컬럼
INT_MAX = 2**31 - 1


class VisitFields(BaseModel):
    """Writable visit fields. Every field is optional here; the create
    endpoint enforces ``place_name`` itself so it can answer with its own
    error code."""

    place_name: Optional[str] = None
    category: Optional[str] = None
    visit_date: Optional[date] = None
    companions: Optional[str] = None
    menu: Optional[str] = None
    price: Optional[int] = Field(None, ge=0, le=INT_MAX)
    rating_overall: Rating = Field(None, ge=0, le=5)
    rating_taste: Rating = Field(None, ge=0, le=5)
    rating_service: Rating = Field(None, ge=0, le=5)
    rating_atmosphere: Rating = Field(None, ge=0, le=5)
    tags: Optional[list[str]] = None
    notes: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    distance_m: Optional[int] = Field(None, ge=-INT_MAX - 1, le=INT_MAX)
    area: Optional[str] = None
    images: Optional[list[str]] = Field(None, max_length=MAX_IMAGES, description="사진 (최대 3장)")
    image_data: Optional[str] = Field(None, description="예전 클라이언트용 원본 사진 필드")

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        # 빈 문자열은 "값 없음"으로 저장
        return None if value == "" else value

    @model_validator(mode="after")
    def check_image_payload(self) -> "VisitFields":
        if self.image_data is None:
            return self
        payload = decode_image_payload(self.image_data)
        if payload.skipped:
            raise ValueError("image_data array entries must be strings")
        if payload.count > MAX_IMAGES:
            raise ValueError(f"at most {MAX_IMAGES} images are allowed")
        return self

    def column_values(self, only_set: bool = False) -> dict[str, Any]:
        """Map the payload onto ``visits`` columns.

        With ``only_set`` only fields present in the request are returned,
        which is what a partial update needs. Photos always come out as the
        JSON-array format, whichever field the client used.
        """
        data = self.model_dump(exclude_unset=only_set, exclude={"images", "image_data"})
        sent = self.model_fields_set
        if "images" in sent:
            data["image_data"] = encode_images(self.images)
        elif "image_data" in sent:
            data["image_data"] = encode_images(decode_image_payload(self.image_data).images)
        elif not only_set:
            data["image_data"] = None
        return data


class VisitCreate(VisitFields):
    pass


class VisitUpdate(VisitFields):
    pass


class VisitOut(BaseModel):
    id: int
    place_name: str
    category: Optional[str] = None
    visit_date: Optional[date] = None
    companions: Optional[str] = None
    menu: Optional[str] = None
    price: Optional[int] = None
    rating_overall: Rating = None
    rating_taste: Rating = None
    rating_service: Rating = None
    rating_atmosphere: Rating = None
    tags: Optional[list[str]] = None
    notes: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    distance_m: Optional[int] = None
    area: Optional[str] = None
    created_at: datetime
    images: Optional[list[str]] = Field(None, description="목록 조회에서 사진을 제외하면 null")
    photo_count: Optional[int] = None


class VisitList(BaseModel):
    items: list[VisitOut]
