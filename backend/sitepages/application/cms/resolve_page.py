from typing import Any, Dict
from sitepages.normalizers.page import normalize_page
from .get_page import get_page_by_slug


def resolve_page(slug: str) -> Dict[str, Any]:
    """
    Public read path: the active page for ``slug`` with its sections in
    render order (ascending sortOrder, ties in stored order).

    Raises NotFound for unknown and inactive slugs alike.
    """
    page = get_page_by_slug(slug, include_inactive=False)
    return normalize_page(page, admin=False)
