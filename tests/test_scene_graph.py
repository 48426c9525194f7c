import pytest
from objimport.geometry import face_bounds, group_bounds, mesh_bounds, is_degenerate
from objimport.parser import parse_string
from objimport.scene_graph import MeshIndex, describe_bounds

TWO_SQUARES = """v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
v 10 0 5
v 11 0 5
v 11 1 5
v 10 1 5
v 50 50 50
g near
f 1 2 3 4
g far
f 5 6 7 8
"""

class TestGeometryUnits:
    def test_face_bounds(self):
        mesh = parse_string(TWO_SQUARES)
        face = mesh.group("near").faces[0]
        assert face_bounds(mesh, face) == ((0, 0, 0), (1, 1, 0))

    def test_group_bounds(self):
        mesh = parse_string(TWO_SQUARES)
        assert group_bounds(mesh, mesh.group("far")) == ((10, 0, 5), (11, 1, 5))

    def test_mesh_bounds_uses_all_positions(self):
        mesh = parse_string(TWO_SQUARES)
        assert mesh_bounds(mesh) == ((0, 0, 0), (50, 50, 50))

    def test_empty_group_has_no_bounds(self):
        mesh = parse_string("g empty\n")
        with pytest.raises(ValueError):
            group_bounds(mesh, mesh.group("empty"))

    def test_is_degenerate(self):
        mesh = parse_string("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 2\nf 1 2 3\n")
        degenerate, ok = mesh.groups[0].faces
        assert is_degenerate(degenerate)
        assert not is_degenerate(ok)


class TestMeshIndexUnits:
    def test_all_faces_indexed(self):
        mi = MeshIndex(parse_string(TWO_SQUARES))
        assert len(mi.faces) == 4
        assert mi.get_face(0)[0] == "near"
        assert mi.get_face(3)[0] == "far"

    def test_faces_near_point(self):
        mi = MeshIndex(parse_string(TWO_SQUARES))
        hits = mi.faces_near((0.5, 0.5, 0))
        assert [(name, face.positions) for name, face in hits] == [
            ("near", (1, 2, 3)),
            ("near", (1, 3, 4)),
        ]

    def test_default_tolerance_is_tight(self):
        mi = MeshIndex(parse_string(TWO_SQUARES))
        # 0.05 above the plane of the near square
        assert mi.faces_near((0.5, 0.5, 0.05)) == []
        assert len(mi.faces_near((0.5, 0.5, 0.05), tolerance=0.1)) == 2

    def test_query_box(self):
        mi = MeshIndex(parse_string(TWO_SQUARES))
        results = mi.query_box(((9, -1, 4), (12, 2, 6)))
        assert results == [2, 3]
        assert all(mi.get_face(fid)[0] == "far" for fid in results)

    def test_query_empty_region(self):
        mi = MeshIndex(parse_string(TWO_SQUARES))
        assert mi.query_box(((100, 100, 100), (200, 200, 200))) == []


class TestDescribeBounds:
    def test_report_lists_mesh_and_groups(self):
        report = describe_bounds(parse_string(TWO_SQUARES + "g empty\n"))
        assert report == (
            "===== BOUNDS =====\n"
            " mesh: (0, 0, 0) - (50, 50, 50)\n"
            " near: (0, 0, 0) - (1, 1, 0)\n"
            " far: (10, 0, 5) - (11, 1, 5)\n"
        )

    def test_report_without_positions(self):
        assert describe_bounds(parse_string("g a\n")) == "===== BOUNDS =====\n (no positions)\n"
