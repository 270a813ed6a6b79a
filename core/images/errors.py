"""Exception classes for the image generation client."""


class ImageError(Exception):
    """Base image generation exception."""

    def __init__(self, message: str, provider: str | None = None):
        self.message = message
        self.provider = provider
        super().__init__(message)


class ImageAPIError(ImageError):
    """The API answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        provider: str | None = None,
    ):
        self.status_code = status_code
        super().__init__(message, provider=provider)


class ImageConnectionError(ImageError):
    """The API could not be reached (connection, DNS, timeout)."""

    pass


class MalformedResponseError(ImageError):
    """The API answered 2xx but the body carries no image."""

    pass


class NotConfiguredError(ImageError):
    """Image generation was requested before an API key was supplied."""

    pass
