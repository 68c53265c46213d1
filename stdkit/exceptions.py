"""Exception hierarchy for stdkit."""


class StdkitError(Exception):
    """Base class of every error raised by stdkit."""


class JsonParseError(StdkitError, ValueError):
    """Malformed JSON, or JSON nested deeper than the allowed depth.

    Carries the decoder message, a machine-readable code and, when known,
    the character offset the decoder stopped at.
    """

    JSON_ERROR_DEPTH = 1
    JSON_ERROR_SYNTAX = 4

    def __init__(self, msg: str, code: int = JSON_ERROR_SYNTAX, pos: int | None = None):
        self.msg = msg
        self.code = code
        self.pos = pos
        super().__init__(f"JSON decode error: {msg}")


class JsonFileNotFoundError(StdkitError, FileNotFoundError):
    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"File not found: {self.path}")


class OutputDirNotFoundError(StdkitError, FileNotFoundError):
    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"Output directory does not exist: {self.path}")


class InvalidInputError(StdkitError, TypeError):
    """A case helper received something other than a ``str``."""

    def __init__(self, func_name: str, value):
        self.func_name = func_name
        self.value = value
        super().__init__(f"{func_name}() expects str, got {type(value).__name__}")


class InvalidCallableError(StdkitError, TypeError):
    def __init__(self, cb):
        self.cb = cb
        super().__init__(f"can not resolve callable from {cb!r}")
