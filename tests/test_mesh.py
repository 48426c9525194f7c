from objimport.mesh import CompositionShape, FaceVertex
from objimport.parser import parse_string

class TestMeshUnits:
    def test_shape_names(self):
        assert str(CompositionShape(False, False)) == "position"
        assert str(CompositionShape(True, False)) == "position/texcoord"
        assert str(CompositionShape(False, True)) == "position//normal"
        assert str(CompositionShape(True, True)) == "position/texcoord/normal"

    def test_vertex_shape(self):
        assert FaceVertex(1, None, 2).shape == CompositionShape(False, True)

    def test_iter_faces_in_group_order(self):
        mesh = parse_string("v 0 0 0\nv 1 0 0\nv 0 1 0\ng b\nf 1 2 3\ng a\nf 3 2 1\ng b\nf 2 3 1\n")
        assert [(g.name, f.positions) for g, f in mesh.iter_faces()] == [
            ("b", (1, 2, 3)),
            ("b", (2, 3, 1)),
            ("a", (3, 2, 1)),
        ]

    def test_dump(self):
        mesh = parse_string("mtllib a.mtl\nv 0 0.5 1\nvt 0.25 1\nvn 0 0 1\ng top\nusemtl Red\nf 1/1/1 1/1/1 1/1/1\n")
        assert mesh.dump() == (
            "===== VERTEX POSITIONS =====\n"
            " 0: 0, 0.5, 1\n"
            "===== VERTEX TEXCOORDS =====\n"
            " 0: 0.25, 1\n"
            "===== VERTEX NORMALS =====\n"
            " 0: 0, 0, 1\n"
            "===== GROUPS =====\n"
            " top: material=Red faces=1\n"
            "===== MATERIAL LIBRARIES =====\n"
            " a.mtl\n"
        )

    def test_dump_empty(self):
        assert parse_string("").dump() == (
            "===== VERTEX POSITIONS =====\n"
            "===== VERTEX TEXCOORDS =====\n"
            "===== VERTEX NORMALS =====\n"
            "===== GROUPS =====\n"
        )
