"""
Decoding of `f` commands.

Each whitespace separated chunk of a face line is one vertex written as
`p`, `p/t`, `p//n` or `p/t/n`. The first face of a run fixes which of those
forms (the composition shape) every later face has to use. Quads are fan
split into two triangles around their first vertex.
"""

import re
from typing import List

from objimport.errors import (
    FaceArityError,
    FaceCompositionError,
    FaceFormatError,
    IndexOutOfRangeError,
    MalformedNumberError,
)
from objimport.mesh import CompositionShape, Face, FaceVertex
from objimport.registry import current_group

MIN_FACE_VERTICES = 3
MAX_FACE_VERTICES = 4
INDEX_PATTERN = re.compile(r"-?\d+", re.ASCII)


def chunk_shape(chunk: str, **location) -> CompositionShape:
    """
    Classify a face chunk by its slash structure.
    Raises FaceFormatError for anything other than p, p/t, p//n or p/t/n.
    """
    parts = chunk.split("/")

    if not parts[0]:
        raise FaceFormatError(f"Face vertex '{chunk}' is missing its position index", **location)

    if len(parts) == 1:
        return CompositionShape(False, False)

    if len(parts) == 2:
        if not parts[1]:
            raise FaceFormatError(f"Face vertex '{chunk}' has an empty texcoord index", **location)
        return CompositionShape(True, False)

    if len(parts) == 3:
        if not parts[2]:
            raise FaceFormatError(f"Face vertex '{chunk}' has an empty normal index", **location)
        return CompositionShape(bool(parts[1]), True)

    raise FaceFormatError(f"Face vertex '{chunk}' has too many '/' separated parts", **location)


def resolve_index(token: str, count: int, kind: str, **location) -> int:
    """
    Turn a 1-based (or negative, end-relative) index into a 1-based index into
    an accumulator that currently holds `count` entries.
    """
    if not INDEX_PATTERN.fullmatch(token):
        raise MalformedNumberError(f"Expected an integer {kind} index, got '{token}'", **location)
    index = int(token)

    # -1 is the most recently declared element
    resolved = index if index > 0 else count + index + 1

    if index == 0 or resolved < 1 or resolved > count:
        raise IndexOutOfRangeError(
            f"Invalid {kind} index {index} ({count} declared so far)", **location
        )
    return resolved


def decode_vertex(state, chunk: str, shape: CompositionShape, **location) -> FaceVertex:
    parts = chunk.split("/")
    position = resolve_index(parts[0], len(state.positions), "position", **location)

    texcoord = None
    if shape.has_texcoord:
        texcoord = resolve_index(parts[1], len(state.texcoords), "texcoord", **location)

    normal = None
    if shape.has_normal:
        normal = resolve_index(parts[2], len(state.normals), "normal", **location)

    return FaceVertex(position, texcoord, normal)


def triangulate(vertices: List[FaceVertex]) -> List[Face]:
    """Fan split around the first vertex: (0,1,2) then (0,2,3)."""
    return [
        Face(vertices[0], vertices[i], vertices[i + 1])
        for i in range(1, len(vertices) - 1)
    ]


def decode_face(state, chunks: List[str]) -> List[Face]:
    """
    Decode the chunks of one `f` line into triangles and append them to the
    active group. Returns the faces that were added.
    """
    location = state.location()

    if not MIN_FACE_VERTICES <= len(chunks) <= MAX_FACE_VERTICES:
        raise FaceArityError(
            f"f requires {MIN_FACE_VERTICES} or {MAX_FACE_VERTICES} vertices, got {len(chunks)}",
            **location,
        )

    shapes = [chunk_shape(chunk, **location) for chunk in chunks]

    # Mixed forms inside one face are judged against the run's shape, or the
    # face's first vertex when this is the first face.
    expected = state.shape if state.shape is not None else shapes[0]
    for observed in shapes:
        if observed != expected:
            raise FaceCompositionError(expected, observed, **location)

    vertices = [decode_vertex(state, chunk, expected, **location) for chunk in chunks]
    faces = triangulate(vertices)

    if state.shape is None:
        state.shape = expected

    current_group(state).faces.extend(faces)
    return faces
