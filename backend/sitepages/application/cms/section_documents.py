from sitepages.domain.exceptions import InvalidSectionPayload, SectionNotFound
from sitepages.domain.sections import validate_section
from sitepages.utils.identifiers import ensure_section_ids


def prepare_sections(raw_sections):
    """
    Validate a full sections list and return it as stored documents.

    Missing or colliding section/item ids are replaced; sections without an
    explicit sortOrder take their list position.
    """
    if not isinstance(raw_sections, list):
        raise InvalidSectionPayload("sections: must be a list")

    sections = []
    for position, raw in enumerate(raw_sections):
        section = validate_section(raw)
        if "sortOrder" not in raw:
            section.sort_order = position
        sections.append(section)

    ensure_section_ids(sections)
    return [section.to_document() for section in sections]


def find_section_index(sections, section_id):
    for index, section in enumerate(sections):
        if section.get("id") == section_id:
            return index
    raise SectionNotFound()
