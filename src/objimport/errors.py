from typing import Optional


class ObjParseError(Exception):
    """
    Base class for everything the .obj parser can fail with.
    Carries the location of the offending line so callers can report it.
    """
    kind = "parse_error"

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line_text: Optional[str] = None,
        source: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.line_text = line_text
        self.source = source

    def __str__(self):
        location = self.source or "<input>"
        if self.line_number is not None:
            location = f"{location}:{self.line_number}"
        text = f"{location}: {self.message}"
        if self.line_text:
            text += f"\n    {self.line_text}"
        return text


class UnknownCommandError(ObjParseError):
    kind = "unknown_command"

    def __init__(self, keyword: str, **location):
        super().__init__(f"Unknown .obj command '{keyword}'", **location)
        self.keyword = keyword


class MalformedNumberError(ObjParseError):
    kind = "malformed_number"


class MissingArgumentError(ObjParseError):
    kind = "missing_argument"


class FaceArityError(ObjParseError):
    kind = "face_arity"


class FaceFormatError(ObjParseError):
    kind = "face_format"


class FaceCompositionError(ObjParseError):
    kind = "face_composition"

    def __init__(self, expected, observed, **location):
        super().__init__(
            f"Face has differing components from previous faces: "
            f"expected {expected}, got {observed}",
            **location,
        )
        self.expected = expected
        self.observed = observed


class IndexOutOfRangeError(ObjParseError):
    kind = "index_out_of_range"
