from typing import List, Optional

from pydantic import Field, ValidationError, field_validator

from .exceptions import InvalidPage
from .sections import _Document


class SeoMeta(_Document):
    keywords: Optional[List[str]] = None
    og_image: Optional[str] = Field(default=None, alias="ogImage")
    og_description: Optional[str] = Field(default=None, alias="ogDescription")

    @field_validator("keywords")
    @classmethod
    def _normalize_keywords(cls, value):
        if value is None:
            return value
        return [keyword.lower() for keyword in value if keyword]


def clean_seo(data) -> dict:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidPage("seo: must be an object")
    try:
        return SeoMeta.model_validate(data).to_document()
    except ValidationError as exc:
        error = exc.errors()[0]
        location = ".".join(str(part) for part in error["loc"])
        raise InvalidPage(f"seo.{location}: {error['msg']}") from exc
