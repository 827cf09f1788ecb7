from sitepages.utils.optimistic_lock import normalize_ts
from sitepages.utils.order import sort_sections


def _isoformat(ts):
    return normalize_ts(ts).isoformat() if ts else None


def normalize_page(page, admin=False):
    """
    Page as returned over the API.

    Public reads get sections in render order; admin reads see the stored
    list as-is plus the revision used for optimistic locking.
    """
    sections = page.section_documents()
    if not admin:
        sections = sort_sections(sections)

    data = {
        "id": page.id,
        "slug": page.slug,
        "title": page.title,
        "metaTitle": page.meta_title,
        "metaDescription": page.meta_description,
        "isActive": page.is_active,
        "seo": page.seo or {},
        "sections": sections,
        "createdAt": _isoformat(page.created_at),
        "updatedAt": _isoformat(page.updated_at),
    }

    if admin:
        data["revision"] = page.revision

    return data
