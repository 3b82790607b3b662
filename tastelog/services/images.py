"""Photo payload stored in ``visits.image_data``.

Two formats live in the column:

* legacy: one raw image string (base64 data URL) stored as-is
* current: a JSON array of up to ``MAX_IMAGES`` image strings

Readers must accept both forever; writers only ever produce the JSON array.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Iterable, Literal

MAX_IMAGES = 3

PayloadKind = Literal["absent", "legacy", "multi"]


@dataclass(frozen=True)
class ImagePayload:
    kind: PayloadKind
    images: tuple[str, ...] = field(default_factory=tuple)
    # entries of a JSON array that were not strings and got dropped
    skipped: int = 0

    @property
    def count(self) -> int:
        return len(self.images)

    @property
    def first(self) -> str | None:
        return self.images[0] if self.images else None


ABSENT = ImagePayload("absent")


def decode_image_payload(raw: str | None) -> ImagePayload:
    """Decode a stored payload. Never raises.

    Bad JSON, or JSON that is not an array, means one legacy image. Array
    entries that are not strings are dropped and counted in ``skipped``.
    """
    if not raw:
        return ABSENT
    try:
        decoded = json.loads(raw)
    except (TypeError, ValueError):
        return ImagePayload("legacy", (raw,))
    if isinstance(decoded, list):
        images = tuple(item for item in decoded if isinstance(item, str))
        return ImagePayload("multi", images, skipped=len(decoded) - len(images))
    return ImagePayload("legacy", (raw,))


def count_images(raw: str | None) -> int:
    return decode_image_payload(raw).count


def first_image(raw: str | None) -> str | None:
    return decode_image_payload(raw).first


def encode_images(images: Iterable[str] | None) -> str | None:
    """Serialize images for storage; an empty collection is stored as NULL."""
    images = list(images or [])
    if not images:
        return None
    return json.dumps(images)
