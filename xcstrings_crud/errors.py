"""Errors raised by xcstrings-crud operations."""


class XCStringsError(Exception):
    """Base class for every catalog error.

    ``str(error)`` is the human-readable description shown by the CLI and
    returned by the tool server.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FileNotFound(XCStringsError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found: {path}")


class FileAlreadyExists(XCStringsError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File already exists: {path}")


class InvalidFileFormat(XCStringsError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid file format at '{path}': {reason}")


class KeyNotFound(XCStringsError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Key not found: '{key}'")


class KeyAlreadyExists(XCStringsError):
    """Raised for an existing key, or an existing ``key:language`` pair."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Key already exists: '{key}'")


class LanguageNotFound(XCStringsError):
    def __init__(self, language: str, key: str):
        self.language = language
        self.key = key
        if key:
            super().__init__(f"Language '{language}' not found for key '{key}'")
        else:
            super().__init__(f"Language '{language}' not found")


class WriteError(XCStringsError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write file at '{path}': {reason}")


class InvalidInput(XCStringsError):
    """Malformed command or tool arguments."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid input: {reason}")
