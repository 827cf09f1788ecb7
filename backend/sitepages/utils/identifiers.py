import uuid


def new_id() -> str:
    return str(uuid.uuid4())


def ensure_item_ids(items):
    """Give every item a non-empty id, unique within the list."""
    seen = set()
    for item in items or []:
        if not item.id or item.id in seen:
            item.id = new_id()
        seen.add(item.id)
    return items


def ensure_section_id(section, taken):
    """
    Assign ``section`` a fresh id when it has none or it collides with
    ``taken``. Item ids are fixed up as well.
    """
    if not section.id or section.id in taken:
        section.id = new_id()
    ensure_item_ids(section.items)
    return section


def ensure_section_ids(sections):
    taken = set()
    for section in sections:
        ensure_section_id(section, taken)
        taken.add(section.id)
    return sections
