"""Exceptions raised by foodfetch."""


class FoodfetchError(Exception):
    """Base class for every foodfetch failure."""


class TransportError(FoodfetchError):
    """The catalog could not be reached or answered with garbage."""


class NotFound(FoodfetchError):
    """No cascade stage produced a recipe for the query."""

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(f'No recipes found for "{query}"')


class RenderError(FoodfetchError):
    """An image could not be turned into ASCII art."""


class ImageDecodeError(RenderError):
    """The image bytes are not a decodable bitmap."""
