"""
Section renderers.

Each section type has one renderer class registered under its type tag.
A renderer turns a validated section into a framework-neutral description
(component name, layout parameters, content) that a frontend maps onto its
own widgets. Rendering never performs I/O: sections backed by live data
(projects, services) describe where to fetch it instead.
"""
from flask import current_app

from sitepages.domain.exceptions import (
    InvalidSectionPayload,
    InvalidSectionSettings,
    InvalidSectionType,
)
from sitepages.domain.sections import SectionBase, validate_section
from .icons import resolve_icon
from .layout import section_layout

PROJECTS_ENDPOINT = "/api/projects"
FEATURED_PROJECTS_ENDPOINT = "/api/projects/featured"
SERVICES_ENDPOINT = "/api/services"
CONSULTATION_ENDPOINT = "/api/consultations"
DEFAULT_FEED_LIMIT = 6

_RENDERERS = {}


def renders(section_type):
    def decorator(cls):
        _RENDERERS[section_type] = cls()
        return cls
    return decorator


def registered_types():
    return frozenset(_RENDERERS)


def _image(image):
    if image is None:
        return None
    return {"url": image.url, "alt": image.alt or ""}


def _as_list(value):
    if value is None:
        return []
    if isinstance(value, list):
        return list(value)
    return [value]


def _item(item):
    return {
        "id": item.id,
        "title": item.title,
        "description": item.description,
        "image": _image(item.image),
        "link": item.link,
        "icon": resolve_icon(item.icon),
    }


class SectionRenderer:
    component = None

    def render(self, section):
        data = {
            "id": section.id,
            "type": section.type,
            "component": self.component,
            "layout": section_layout(section),
            "title": section.title,
            "subtitle": section.subtitle,
        }
        data.update(self.body(section))
        return data

    def body(self, section):
        raise NotImplementedError


@renders("hero")
class HeroRenderer(SectionRenderer):
    component = "headline"

    def body(self, section):
        return {
            "paragraphs": section.paragraphs(),
            "image": _image(section.image),
        }


@renders("text")
class TextRenderer(SectionRenderer):
    component = "text_with_image"

    def body(self, section):
        return {
            "paragraphs": section.paragraphs(),
            "image": _image(section.image) or {"placeholder": True},
        }


@renders("cards")
class CardsRenderer(SectionRenderer):
    component = "card_grid"

    def body(self, section):
        return {"cards": [_item(item) for item in section.items or []]}


@renders("list")
class ListRenderer(SectionRenderer):
    component = "bullet_list"

    def body(self, section):
        return {
            "entries": [
                {"id": item.id, "title": item.title, "description": item.description}
                for item in section.items or []
            ]
        }


@renders("image")
class ImageRenderer(SectionRenderer):
    component = "centered_image"

    def body(self, section):
        return {"image": _image(section.image)}


@renders("contact_form")
class ContactFormRenderer(SectionRenderer):
    component = "contact_form"

    def body(self, section):
        # Submission itself goes to the consultation intake service
        return {
            "form": {
                "action": CONSULTATION_ENDPOINT,
                "method": "POST",
                "fields": ["name", "email", "phone", "message"],
            }
        }


@renders("faq")
class FaqRenderer(SectionRenderer):
    component = "accordion"

    def body(self, section):
        # Open/closed state belongs to the client, every entry starts closed
        return {
            "entries": [
                {
                    "id": item.id,
                    "question": item.title,
                    "answer": item.description,
                    "expanded": False,
                }
                for item in section.items or []
            ]
        }


class FeedRenderer(SectionRenderer):
    """Grid filled at display time from another service's API."""

    def data_source(self, section):
        raise NotImplementedError

    def body(self, section):
        return {"dataSource": self.data_source(section)}

    @staticmethod
    def _limit(section):
        return (section.settings and section.settings.limit) or DEFAULT_FEED_LIMIT


@renders("projects")
class ProjectsRenderer(FeedRenderer):
    component = "project_grid"

    def data_source(self, section):
        featured_only = True
        if section.settings and section.settings.featured_only is not None:
            featured_only = section.settings.featured_only

        return {
            "endpoint": FEATURED_PROJECTS_ENDPOINT if featured_only else PROJECTS_ENDPOINT,
            "params": {"limit": self._limit(section)},
        }


@renders("services")
class ServicesRenderer(FeedRenderer):
    component = "service_grid"

    def data_source(self, section):
        params = {"limit": self._limit(section)}
        if section.settings and section.settings.featured_only:
            params["featured"] = True
        return {"endpoint": SERVICES_ENDPOINT, "params": params}

    def body(self, section):
        data = super().body(section)
        # Section items are shown when the services feed is empty
        data["fallback"] = [
            dict(
                _item(item),
                features=_as_list((item.metadata or {}).get("features")),
            )
            for item in section.items or []
        ]
        return data


def unknown_section(section, message):
    section = section if isinstance(section, dict) else {}
    return {
        "id": section.get("id"),
        "type": section.get("type"),
        "component": "unknown",
        "message": message,
    }


def render_section(section):
    """
    Render a stored section document or a validated section.

    Sections that no longer validate (for instance a type that has since
    been removed) render as a diagnostic placeholder instead of failing the
    whole page.
    """
    if not isinstance(section, SectionBase):
        try:
            section = validate_section(section)
        except InvalidSectionType:
            section_type = section.get("type") if isinstance(section, dict) else None
            current_app.logger.warning("Unknown section type %r", section_type)
            return unknown_section(section, f"Unknown section type: {section_type}")
        except (InvalidSectionSettings, InvalidSectionPayload) as exc:
            current_app.logger.warning("Unrenderable section: %s", exc)
            return unknown_section(section, f"Invalid section: {exc}")

    renderer = _RENDERERS.get(section.type)
    if renderer is None:
        return unknown_section(section.to_document(), f"Unknown section type: {section.type}")
    return renderer.render(section)


def render_page(page):
    """
    Render a resolved page document (see ``resolve_page``), keeping its
    section order.
    """
    seo = page.get("seo") or {}
    return {
        "slug": page["slug"],
        "title": page["title"],
        "meta": {
            "title": page.get("metaTitle") or page["title"],
            "description": page.get("metaDescription"),
            "keywords": seo.get("keywords", []),
            "ogImage": seo.get("ogImage"),
            "ogDescription": seo.get("ogDescription") or page.get("metaDescription"),
        },
        "sections": [render_section(section) for section in page.get("sections", [])],
    }
