# engine/exceptions.py


class GradeError(Exception):
    pass


class GradeParseError(GradeError, ValueError):

    def __init__(self, field: str, raw: object, reason: str = "") -> None:
        self.field = field
        self.raw = raw
        self.reason = reason
        message = f"Failed to parse {field}: {raw!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
