"""
Custom exceptions for cube state and move operations
"""


class CubeError(Exception):
    """Base class for every error raised by nxcube"""
    def __init__(self, message: str, error_type: str = None, details: dict = None):
        self.message = message
        self.error_type = error_type or "CubeError"
        self.details = details or {}
        super().__init__(self.message)


class InvalidSize(CubeError, ValueError):
    """Raised when a cube size is below 2 or not an integer"""
    def __init__(self, message: str, size=None, details: dict = None):
        self.size = size
        super().__init__(message, "InvalidSize", details)


class IndexOutOfRange(CubeError, IndexError):
    """Raised when a sticker row/column falls outside [0, size)"""
    def __init__(self, message: str, row: int = None, col: int = None, details: dict = None):
        self.row = row
        self.col = col
        super().__init__(message, "IndexOutOfRange", details)


class InvalidMove(CubeError, ValueError):
    """Raised for unknown faces or malformed move notation"""
    def __init__(self, message: str, move=None, details: dict = None):
        self.move = move
        super().__init__(message, "InvalidMove", details)


class InvalidLayer(CubeError, ValueError):
    """Raised when a slice layer does not exist on the cube"""
    def __init__(self, message: str, layer: int = None, size: int = None, details: dict = None):
        self.layer = layer
        self.size = size
        super().__init__(message, "InvalidLayer", details)


class InvalidArgument(CubeError, ValueError):
    """Raised for bad scalar arguments (lengths, difficulty names, payloads)"""
    def __init__(self, message: str, argument: str = None, details: dict = None):
        self.argument = argument
        super().__init__(message, "InvalidArgument", details)


class ExhaustedMoveSet(CubeError, RuntimeError):
    """Raised when the scrambler has no candidate move left to draw"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, "ExhaustedMoveSet", details)


class ValidationError(CubeError, ValueError):
    """Raised when a cube state violates a structural invariant"""
    def __init__(
        self,
        message: str,
        face: str = None,
        color: str = None,
        expected_count: int = None,
        actual_count: int = None,
        details: dict = None,
    ):
        self.face = face
        self.color = color
        self.expected_count = expected_count
        self.actual_count = actual_count
        details = dict(details or {})
        for key, value in (
            ("face", face),
            ("color", color),
            ("expected_count", expected_count),
            ("actual_count", actual_count),
        ):
            if value is not None:
                details.setdefault(key, value)
        super().__init__(message, "ValidationError", details)
