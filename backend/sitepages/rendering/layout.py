"""
Deterministic mapping from section settings to layout parameters.

Defaults when settings are absent: medium spacing, left alignment and, for
grid sections, three columns.
"""
DEFAULT_SPACING = "medium"
DEFAULT_ALIGNMENT = "left"

# Vertical padding per spacing step
SPACING_PADDING = {
    "small": "2rem",
    "medium": "4rem",
    "large": "6rem",
}


def grid_columns(columns):
    """Columns per breakpoint; narrow screens always stack."""
    if columns <= 1:
        return {"base": 1}
    if columns == 2:
        return {"base": 1, "md": 2}
    return {"base": 1, "md": 2, "lg": columns}


def section_layout(section):
    settings = section.settings
    spacing = (settings and settings.spacing) or DEFAULT_SPACING
    alignment = (settings and settings.alignment) or DEFAULT_ALIGNMENT

    layout = {
        "spacing": spacing,
        "paddingY": SPACING_PADDING[spacing],
        "align": alignment,
        "backgroundColor": settings.background_color if settings else None,
        "textColor": settings.text_color if settings else None,
    }

    if section.default_columns is not None:
        columns = (settings and settings.columns) or section.default_columns
        layout["columns"] = columns
        layout["grid"] = grid_columns(columns)

    return layout
