class BuilderError(Exception):
    """A builder operation was rejected; the design is left unchanged."""

    status_code = 400


class SectionNotFound(BuilderError):
    status_code = 404


class UnknownSectionType(BuilderError):
    pass


class UnknownTemplate(BuilderError):
    status_code = 404


class UnknownPreset(BuilderError):
    status_code = 404


class VersionNotFound(BuilderError):
    status_code = 404


class InvalidDirection(BuilderError):
    pass


class InvalidPatch(BuilderError):
    pass


class InvalidDesignPayload(BuilderError):
    pass


class ClipboardEmpty(BuilderError):
    pass


class ClipboardTypeMismatch(BuilderError):
    pass


class PersistenceError(Exception):
    """The design store could not load or save a document."""
