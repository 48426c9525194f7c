from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ValidationError:
    error_type: str  # "parse_error", "empty_group", "degenerate_face"
    message: str
    group_names: list[str] = field(default_factory=list)
    line_number: Optional[int] = None


@dataclass
class ValidationResult:
    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, errors: list[ValidationError]) -> "ValidationResult":
        return cls(is_valid=False, errors=errors)


from .errors import ObjParseError
from .mesh import ObjMesh, Group, Face, FaceVertex, CompositionShape
from .parser import parse_file, parse_lines, parse_string
from .loader import Loader
from .geometry import is_degenerate

def validate_obj(file_path: Path) -> ValidationResult:
    """
    Validate an .obj file: it must parse, every group must own at least one
    face, and no face may collapse onto a repeated position.
    """
    loader = Loader(verbose=False)
    try:
        mesh = loader.load(file_path)
    except ObjParseError as e:
        return ValidationResult.invalid([
            ValidationError(error_type="parse_error", message=str(e), line_number=e.line_number)
        ])
    except OSError as e:
        return ValidationResult.invalid([
            ValidationError(error_type="parse_error", message=str(e))
        ])

    errors = []

    for group in mesh.groups:
        if not group.faces:
            errors.append(ValidationError(
                error_type="empty_group",
                message=f"Group '{group.name}' has no faces",
                group_names=[group.name]
            ))

    for group, face in mesh.iter_faces():
        if is_degenerate(face):
            errors.append(ValidationError(
                error_type="degenerate_face",
                message=f"Face {face.positions} in group '{group.name}' repeats a position",
                group_names=[group.name]
            ))

    if errors:
        return ValidationResult.invalid(errors)

    return ValidationResult.valid()
