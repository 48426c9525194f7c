"""
Immutable result types produced by a parse run.
"""

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True)
class CompositionShape:
    """Which optional attributes every face vertex of a run carries."""
    has_texcoord: bool = False
    has_normal: bool = False

    def __str__(self):
        if self.has_texcoord and self.has_normal:
            return "position/texcoord/normal"
        if self.has_texcoord:
            return "position/texcoord"
        if self.has_normal:
            return "position//normal"
        return "position"


@dataclass(frozen=True)
class FaceVertex:
    # 1-based, already resolved (negative indices never reach this point)
    position: int
    texcoord: Optional[int] = None
    normal: Optional[int] = None

    @property
    def shape(self) -> CompositionShape:
        return CompositionShape(self.texcoord is not None, self.normal is not None)


@dataclass(frozen=True)
class Face:
    a: FaceVertex
    b: FaceVertex
    c: FaceVertex

    @property
    def vertices(self) -> tuple[FaceVertex, FaceVertex, FaceVertex]:
        return (self.a, self.b, self.c)

    @property
    def positions(self) -> tuple[int, int, int]:
        return (self.a.position, self.b.position, self.c.position)


@dataclass(frozen=True)
class Group:
    name: str
    material: str
    faces: tuple[Face, ...] = ()


@dataclass(frozen=True)
class ObjMesh:
    """
    Everything read out of one .obj input.

    Attribute lists keep file order; a FaceVertex index N refers to
    element N - 1 of the matching list.
    """
    positions: tuple[tuple[float, float, float], ...] = ()
    texcoords: tuple[tuple[float, float], ...] = ()
    normals: tuple[tuple[float, float, float], ...] = ()
    groups: tuple[Group, ...] = ()
    material_libraries: tuple[str, ...] = ()
    shape: Optional[CompositionShape] = None

    @property
    def face_count(self) -> int:
        return sum(len(g.faces) for g in self.groups)

    def group(self, name: str) -> Group:
        for g in self.groups:
            if g.name == name:
                return g
        raise KeyError(name)

    def iter_faces(self) -> Iterator[tuple[Group, Face]]:
        for g in self.groups:
            for face in g.faces:
                yield g, face

    def position_of(self, vertex: FaceVertex) -> tuple[float, float, float]:
        return self.positions[vertex.position - 1]

    def dump(self) -> str:
        """
        Render the parsed data as a plain-text listing, mostly for debugging
        an asset from the command line.
        """
        lines = ["===== VERTEX POSITIONS ====="]
        for i, (x, y, z) in enumerate(self.positions):
            lines.append(f" {i}: {x:g}, {y:g}, {z:g}")

        lines.append("===== VERTEX TEXCOORDS =====")
        for i, (u, v) in enumerate(self.texcoords):
            lines.append(f" {i}: {u:g}, {v:g}")

        lines.append("===== VERTEX NORMALS =====")
        for i, (x, y, z) in enumerate(self.normals):
            lines.append(f" {i}: {x:g}, {y:g}, {z:g}")

        lines.append("===== GROUPS =====")
        for g in self.groups:
            lines.append(f" {g.name}: material={g.material} faces={len(g.faces)}")

        if self.material_libraries:
            lines.append("===== MATERIAL LIBRARIES =====")
            for lib in self.material_libraries:
                lines.append(f" {lib}")

        return "\n".join(lines) + "\n"
