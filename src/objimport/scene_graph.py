from typing import List, Tuple
from rtree import index
from objimport.mesh import Face, ObjMesh
from objimport.geometry import Bounds, Point, face_bounds, group_bounds, mesh_bounds

# Mesh units are arbitrary, so only absorb float noise by default
DEFAULT_TOLERANCE = 1e-6

class MeshIndex:
    """
    Spatial index over the triangles of a parsed mesh.
    Face ids follow mesh.iter_faces() order.
    """

    def __init__(self, mesh: ObjMesh):
        self.mesh = mesh
        self.faces: List[Tuple[str, Face]] = []
        p = index.Property()
        p.dimension = 3
        self.index = index.Index(properties=p)

        for fid, (group, face) in enumerate(mesh.iter_faces()):
            self.faces.append((group.name, face))
            (min_x, min_y, min_z), (max_x, max_y, max_z) = face_bounds(mesh, face)
            self.index.insert(fid, (min_x, min_y, min_z, max_x, max_y, max_z))

    def get_face(self, fid: int) -> Tuple[str, Face]:
        return self.faces[fid]

    def query_box(self, bounds: Bounds) -> List[int]:
        """
        Ids of faces whose bounds touch `bounds`, in ascending order.
        """
        (min_x, min_y, min_z), (max_x, max_y, max_z) = bounds
        return sorted(self.index.intersection((min_x, min_y, min_z, max_x, max_y, max_z)))

    def faces_near(self, point: Point, tolerance: float = DEFAULT_TOLERANCE) -> List[Tuple[str, Face]]:
        """
        (group name, face) pairs whose bounds come within `tolerance` of `point`.
        """
        x, y, z = point
        box = (x - tolerance, y - tolerance, z - tolerance), (x + tolerance, y + tolerance, z + tolerance)
        return [self.faces[fid] for fid in self.query_box(box)]


def describe_bounds(mesh: ObjMesh) -> str:
    """
    Text report of the mesh's bounds and of each group that owns faces.
    """
    def fmt(bounds: Bounds) -> str:
        (min_x, min_y, min_z), (max_x, max_y, max_z) = bounds
        return f"({min_x:g}, {min_y:g}, {min_z:g}) - ({max_x:g}, {max_y:g}, {max_z:g})"

    if not mesh.positions:
        return "===== BOUNDS =====\n (no positions)\n"

    lines = ["===== BOUNDS =====", f" mesh: {fmt(mesh_bounds(mesh))}"]
    for g in mesh.groups:
        if g.faces:
            lines.append(f" {g.name}: {fmt(group_bounds(mesh, g))}")
    return "\n".join(lines) + "\n"
