class CmsError(Exception):
    """Base class for errors surfaced to API callers as ``{success: false}``."""

    status_code = 400
    default_message = "Request could not be processed"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)

    @property
    def message(self):
        return str(self)


class NotFound(CmsError):
    status_code = 404
    default_message = "Page not found"


class SectionNotFound(CmsError):
    status_code = 404
    default_message = "Section not found"


class DuplicateSlug(CmsError):
    default_message = "Page with this slug already exists"


class InvalidPage(CmsError):
    default_message = "Validation error"


class InvalidSectionType(CmsError):
    default_message = "Invalid section type"


class InvalidSectionSettings(CmsError):
    default_message = "Invalid section settings"


class InvalidSectionPayload(CmsError):
    default_message = "Invalid section payload"


class InvalidTransition(CmsError):
    default_message = "Illegal page transition"


class UnknownSectionIds(CmsError):
    default_message = "Reorder references unknown sections"


class PreconditionInvalid(CmsError):
    default_message = "Invalid precondition header"


class Conflict(CmsError):
    status_code = 409
    default_message = "Conflict detected. Page has been modified."
