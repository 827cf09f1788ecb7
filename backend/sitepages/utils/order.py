def sort_sections(sections, order_field="sortOrder"):
    """
    Sections in render order: ascending sort order, ties keep list order.
    """
    return sorted(sections, key=lambda s: s.get(order_field) or 0)


def next_sort_order(sections, order_field="sortOrder"):
    """Sort order that places a new section after every existing one."""
    if not sections:
        return 0
    return max(s.get(order_field) or 0 for s in sections) + 1
