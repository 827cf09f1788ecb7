"""
Section payload model.

A section is stored inside its page as a plain JSON document; this module is
the typed view over that document. Every section type is its own model with a
``type`` literal, and the union of them is discriminated on that tag, so a
payload is validated against exactly one variant.

Field names use snake_case in Python and the camelCase wire names
(``sortOrder``, ``backgroundColor``...) as aliases.
"""
from typing import Annotated, ClassVar, Dict, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
)

from .exceptions import (
    InvalidSectionPayload,
    InvalidSectionSettings,
    InvalidSectionType,
)

SECTION_TYPES = (
    "hero",
    "text",
    "cards",
    "list",
    "image",
    "contact_form",
    "faq",
    "projects",
    "services",
)

Spacing = Literal["small", "medium", "large"]
Alignment = Literal["left", "center", "right"]

# Item metadata is an open extension point, but only for flat values
MetadataScalar = Union[StrictBool, StrictInt, StrictFloat, StrictStr]
MetadataValue = Union[MetadataScalar, List[MetadataScalar]]


class _Document(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        str_strip_whitespace=True,
    )

    def to_document(self) -> dict:
        """Dump to the stored/wire shape: camelCase keys, unset fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ImageRef(_Document):
    url: str
    alt: Optional[str] = None
    public_id: Optional[str] = Field(default=None, alias="publicId")


class Item(_Document):
    id: str = ""
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[ImageRef] = None
    link: Optional[str] = None
    icon: Optional[str] = None
    metadata: Optional[Dict[str, MetadataValue]] = None


class SectionSettings(_Document):
    background_color: Optional[str] = Field(default=None, alias="backgroundColor")
    text_color: Optional[str] = Field(default=None, alias="textColor")
    columns: Optional[StrictInt] = Field(default=None, ge=1, le=6)
    spacing: Optional[Spacing] = None
    alignment: Optional[Alignment] = None

    # Data source hints for the projects/services grids
    featured_only: Optional[bool] = Field(default=None, alias="featuredOnly")
    limit: Optional[StrictInt] = Field(default=None, ge=1, le=24)


class SectionBase(_Document):
    id: str = ""
    title: Optional[str] = None
    subtitle: Optional[str] = None
    content: Optional[str] = None
    image: Optional[ImageRef] = None
    items: Optional[List[Item]] = None
    settings: Optional[SectionSettings] = None
    sort_order: int = Field(default=0, alias="sortOrder")

    # Grid width used when settings.columns is absent; None for non-grid types
    default_columns: ClassVar[Optional[int]] = None

    def paragraphs(self) -> List[str]:
        if not self.content:
            return []
        return [p.strip() for p in self.content.split("\n") if p.strip()]


class HeroSection(SectionBase):
    type: Literal["hero"] = "hero"


class TextSection(SectionBase):
    type: Literal["text"] = "text"


class CardsSection(SectionBase):
    type: Literal["cards"] = "cards"
    default_columns: ClassVar[Optional[int]] = 3


class ListSection(SectionBase):
    type: Literal["list"] = "list"


class ImageSection(SectionBase):
    type: Literal["image"] = "image"


class ContactFormSection(SectionBase):
    type: Literal["contact_form"] = "contact_form"


class FaqSection(SectionBase):
    type: Literal["faq"] = "faq"


class ProjectsSection(SectionBase):
    type: Literal["projects"] = "projects"
    default_columns: ClassVar[Optional[int]] = 3


class ServicesSection(SectionBase):
    type: Literal["services"] = "services"
    default_columns: ClassVar[Optional[int]] = 3


Section = Annotated[
    Union[
        HeroSection,
        TextSection,
        CardsSection,
        ListSection,
        ImageSection,
        ContactFormSection,
        FaqSection,
        ProjectsSection,
        ServicesSection,
    ],
    Field(discriminator="type"),
]

_section_adapter = TypeAdapter(Section)


def _strip_tag(error, section_type):
    # Errors from a tagged union are located under the tag value
    loc = tuple(error["loc"])
    if loc[:1] == (section_type,):
        loc = loc[1:]
    return dict(error, loc=loc)


def _describe(error) -> str:
    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {error['msg']}" if location else error["msg"]


def validate_section(data) -> SectionBase:
    """
    Validate a section payload against the variant named by its ``type``.

    Fields that do not belong to the model are dropped, never rejected.
    """
    if isinstance(data, SectionBase):
        data = data.to_document()

    if not isinstance(data, dict):
        raise InvalidSectionPayload("Section must be a JSON object")

    section_type = data.get("type")
    if section_type not in SECTION_TYPES:
        raise InvalidSectionType(f"Invalid section type: {section_type!r}")

    try:
        return _section_adapter.validate_python(data)
    except ValidationError as exc:
        errors = [_strip_tag(error, section_type) for error in exc.errors()]
        for error in errors:
            if error["loc"][:1] == ("settings",):
                raise InvalidSectionSettings(_describe(error)) from exc
        raise InvalidSectionPayload(_describe(errors[0])) from exc

