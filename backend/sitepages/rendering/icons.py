# name -> (glyph, tone)
ICONS = {
    "lightbulb": ("\U0001F4A1", "blue"),
    "heart": ("♥", "green"),
    "check-circle": ("✔", "purple"),
    "users": ("\U0001F465", "orange"),
    "phone": ("☎", "blue"),
    "mail": ("✉", "green"),
    "location": ("\U0001F4CD", "red"),
}

DEFAULT_ICON = ("•", "gray")


def resolve_icon(name):
    if not name:
        return None
    glyph, tone = ICONS.get(name, DEFAULT_ICON)
    return {"name": name, "glyph": glyph, "tone": tone}
