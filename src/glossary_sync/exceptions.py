"""Domain errors raised while building and syncing glossaries."""


class GlossarySyncError(Exception):
    """Base class, carries a numeric code for the backend to report."""

    code: int = 0

    def __init__(self, message: str, code: int = None):
        super().__init__(message)
        if code is not None:
            self.code = code


class InvalidGlossaryPage(GlossarySyncError):
    """The page is not a glossary folder."""

    code = 1716556217634


class EntriesRequired(GlossarySyncError):
    """A glossary cannot be created without entries."""

    code = 1677169192


class GlossaryCreationFailed(GlossarySyncError):
    """The page produced no glossary that could be synced."""

    code = 1714987594661
