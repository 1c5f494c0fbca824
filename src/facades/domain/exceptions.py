"""Exceptions raised by the facade designer."""


class FacadeError(Exception):
    """Base class for facade designer errors."""

    pass


class ImageLoadError(FacadeError):
    """Raised when a source image cannot be opened or decoded."""

    def __init__(self, message: str, path: object | None = None) -> None:
        self.path = path
        super().__init__(message)
