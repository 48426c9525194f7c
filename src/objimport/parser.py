from pathlib import Path
import io
import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from objimport.errors import MalformedNumberError, MissingArgumentError, UnknownCommandError
from objimport.faces import decode_face
from objimport.mesh import CompositionShape, ObjMesh
from objimport.registry import GroupBuilder, add_material_library, assign_material, select_group

COMMENT_CHAR = "#"
# Plain decimal or exponent notation only; no nan, inf or digit separators
FLOAT_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


@dataclass
class ParseState:
    """
    All mutable state of one parse run. Handlers receive it explicitly;
    nothing is shared between runs.
    """
    source: str = "<string>"
    positions: list[tuple[float, float, float]] = field(default_factory=list)
    texcoords: list[tuple[float, float]] = field(default_factory=list)
    normals: list[tuple[float, float, float]] = field(default_factory=list)
    # insertion ordered, so this is also the group order of the result
    groups: dict[str, GroupBuilder] = field(default_factory=dict)
    material_libraries: list[str] = field(default_factory=list)
    active_group: Optional[str] = None
    shape: Optional[CompositionShape] = None
    line_number: int = 0
    line_text: str = ""

    def location(self) -> dict:
        return {
            "line_number": self.line_number,
            "line_text": self.line_text,
            "source": self.source,
        }

    def to_mesh(self) -> ObjMesh:
        return ObjMesh(
            positions=tuple(self.positions),
            texcoords=tuple(self.texcoords),
            normals=tuple(self.normals),
            groups=tuple(g.freeze() for g in self.groups.values()),
            material_libraries=tuple(self.material_libraries),
            shape=self.shape,
        )


def tokenize(line: str) -> list[str]:
    """
    Strip the comment (everything from '#') and split the rest on whitespace.
    An empty list means there is nothing to do for this line.
    """
    return line.split(COMMENT_CHAR, 1)[0].split()


def parse_floats(state: ParseState, args: list[str], count: int, command: str) -> tuple[float, ...]:
    if len(args) != count:
        raise MalformedNumberError(
            f"{command} command requires {count} numeric arguments, got {len(args)}",
            **state.location(),
        )
    for a in args:
        if not FLOAT_PATTERN.fullmatch(a):
            raise MalformedNumberError(
                f"Failed to parse {command} argument '{a}' as a float",
                **state.location(),
            )
    return tuple(float(a) for a in args)


def parse_name(state: ParseState, args: list[str], command: str) -> str:
    # names and filenames may contain spaces
    if not args:
        raise MissingArgumentError(f"{command} requires a name", **state.location())
    return " ".join(args)


def _handle_position(state: ParseState, args: list[str]) -> None:
    state.positions.append(parse_floats(state, args, 3, "v"))


def _handle_texcoord(state: ParseState, args: list[str]) -> None:
    state.texcoords.append(parse_floats(state, args, 2, "vt"))


def _handle_normal(state: ParseState, args: list[str]) -> None:
    state.normals.append(parse_floats(state, args, 3, "vn"))


def _handle_face(state: ParseState, args: list[str]) -> None:
    decode_face(state, args)


def _handle_group(state: ParseState, args: list[str]) -> None:
    select_group(state, parse_name(state, args, "g"))


def _handle_material(state: ParseState, args: list[str]) -> None:
    assign_material(state, parse_name(state, args, "usemtl"))


def _handle_material_lib(state: ParseState, args: list[str]) -> None:
    add_material_library(state, parse_name(state, args, "mtllib"))


# Commands outside this table (s, o, l, ...) are rejected, not ignored.
COMMAND_HANDLERS: dict[str, Callable[[ParseState, list[str]], None]] = {
    "v": _handle_position,
    "vt": _handle_texcoord,
    "vn": _handle_normal,
    "f": _handle_face,
    "g": _handle_group,
    "usemtl": _handle_material,
    "mtllib": _handle_material_lib,
}


def parse_line(state: ParseState, line: str) -> None:
    """
    Process one line of input against `state`.
    """
    state.line_number += 1
    state.line_text = line.strip()

    tokens = tokenize(line)
    if not tokens:
        return

    command, *args = tokens
    handler = COMMAND_HANDLERS.get(command)
    if handler is None:
        raise UnknownCommandError(command, **state.location())
    handler(state, args)


def parse_lines(lines: Iterable[str], source: str = "<string>") -> ObjMesh:
    """
    Parse an iterable of lines (a file object works) into an ObjMesh.
    The first error aborts the run; nothing partial is returned.
    """
    state = ParseState(source=source)
    for line in lines:
        parse_line(state, line)
    return state.to_mesh()


def parse_string(contents: str, source: str = "<string>") -> ObjMesh:
    # Same line splitting as a file opened in text mode
    return parse_lines(io.StringIO(contents, newline=None), source=source)


def parse_file(file_path: Path) -> ObjMesh:
    """
    Parse an .obj file from disk.
    """
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        return parse_lines(f, source=str(file_path))
