from typing import Iterable, Tuple
from objimport.mesh import Face, Group, ObjMesh

Point = Tuple[float, float, float]
Bounds = Tuple[Point, Point]


def bounds_of_points(points: Iterable[Point]) -> Bounds:
    points = list(points)
    if not points:
        raise ValueError("Cannot compute bounds of an empty point set")

    min_x = min(p[0] for p in points)
    min_y = min(p[1] for p in points)
    min_z = min(p[2] for p in points)
    max_x = max(p[0] for p in points)
    max_y = max(p[1] for p in points)
    max_z = max(p[2] for p in points)

    return (min_x, min_y, min_z), (max_x, max_y, max_z)


def face_bounds(mesh: ObjMesh, face: Face) -> Bounds:
    return bounds_of_points(mesh.position_of(v) for v in face.vertices)


def group_bounds(mesh: ObjMesh, group: Group) -> Bounds:
    """
    Axis-aligned box around every position referenced by the group's faces.
    """
    return bounds_of_points(
        mesh.position_of(v) for face in group.faces for v in face.vertices
    )


def mesh_bounds(mesh: ObjMesh) -> Bounds:
    # Uses every declared position, including ones no face references
    return bounds_of_points(mesh.positions)


def is_degenerate(face: Face) -> bool:
    """A face that uses the same position more than once has no area."""
    return len(set(face.positions)) < 3
