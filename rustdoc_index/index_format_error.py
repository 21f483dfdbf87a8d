"""Error raised for malformed or truncated search index payloads."""


class IndexFormatError(ValueError):
    """A search index payload could not be parsed."""

    def __init__(
        self,
        message: str,
        library: str | None = None,
        position: str | None = None,
    ) -> None:
        """Attach the library and record position to the message when known."""
        self.library = library
        self.position = position
        where = []
        if library is not None:
            where.append(f"library {library!r}")
        if position is not None:
            where.append(position)
        if where:
            message = f"{', '.join(where)}: {message}"
        super().__init__(message)
