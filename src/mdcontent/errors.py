"""Error kinds reported while loading and validating content documents"""

from typing import Optional


class ContentError(Exception):
    """Base class for per-document problems; carries the offending source path."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message

    def __eq__(self, other) -> bool:
        return (
            type(self) is type(other)
            and self.path == other.path
            and self.message == other.message
        )

    def __hash__(self) -> int:
        return hash((type(self), self.path, self.message))


class MalformedMetadataError(ContentError):
    """Front matter is missing, unparseable, or a field fails to validate."""

    def __init__(self, path: str, message: str, field: Optional[str] = None):
        super().__init__(path, message)
        self.field = field


class DuplicatePathError(ContentError):
    """A later source resolved to a path that was already loaded (first wins)."""

    def __init__(self, path: str, first_source: str, rejected_source: str):
        super().__init__(
            path,
            f"duplicate path; '{rejected_source}' rejected, '{first_source}' kept",
        )
        self.first_source = first_source
        self.rejected_source = rejected_source


ErrorList = list[ContentError]
