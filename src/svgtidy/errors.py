class CheckError:
    """Represents a document check failure."""

    __slots__ = ("code", "message", "path")

    def __init__(self, code, message=None, path=None):
        self.code = code
        self.message = message or code
        self.path = path

    def __repr__(self):
        if self.path is not None:
            return f"CheckError({self.code!r}, path={self.path!r})"
        return f"CheckError({self.code!r})"

    def __str__(self):
        if self.message != self.code:
            return f"{self.code} - {self.message}"
        return self.code

    def __eq__(self, other):
        if not isinstance(other, CheckError):
            return NotImplemented
        return self.code == other.code and self.path == other.path

    __hash__ = None  # Unhashable since we define __eq__
