"""Exception hierarchy for reading EPUB documents."""


class EpubError(Exception):
    """Base class for every error raised by epubdoc."""


# Archive


class FileOpenError(EpubError):
    """The container could not be opened as a zip archive."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot open {path}: {reason}")


class EntryNotFound(EpubError):
    """No archive entry exists at the requested path."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Entry not found in archive: {path}")


class EntryReadError(EpubError):
    """An archive entry exists but its bytes can't be read back."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read entry {path}: {reason}")


class EntryDecodeError(EpubError):
    """An archive entry is not valid text in the configured encoding."""

    def __init__(self, path: str, encoding: str):
        self.path = path
        self.encoding = encoding
        super().__init__(f"Entry {path} is not valid {encoding}")


# XML


class MalformedInput(EpubError):
    """Bytes that should be XML did not parse."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed XML: {reason}")


class ElementNotFound(EpubError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Element not found: {name}")


class AttributeMissing(EpubError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Attribute missing: {name}")


# Resources


class ResourceIdNotFound(EpubError):
    def __init__(self, resource_id: str):
        self.resource_id = resource_id
        super().__init__(f"Resource id not found: {resource_id}")


class ResourcePathNotFound(EpubError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Resource path not found: {path}")


class CoverNotFound(EpubError):
    def __init__(self):
        super().__init__("Cover not found")


# Navigation


class NavigationError(EpubError):
    """Base class for failed cursor moves. The cursor is never changed."""


class LastPage(NavigationError):
    def __init__(self):
        super().__init__("Already at the last page")


class FirstPage(NavigationError):
    def __init__(self):
        super().__init__("Already at the first page")


class InvalidPageIndex(NavigationError):
    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Page index not valid: {index}")


class NavigationBroken(NavigationError):
    """The cursor does not point into the spine (e.g. the spine is empty)."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Current page {index} is outside the spine")
