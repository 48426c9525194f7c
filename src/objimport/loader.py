from pathlib import Path
from typing import List, Optional
from objimport.config import get_asset_dir
from objimport.mesh import ObjMesh
from objimport.parser import parse_file

class Loader:
    def __init__(self, asset_dir: Optional[Path] = None, verbose: bool = True):
        self.asset_dir = Path(asset_dir) if asset_dir is not None else get_asset_dir()
        self.verbose = verbose
        self.mesh: Optional[ObjMesh] = None
        self.path: Optional[Path] = None
        self.material_libraries: List[Path] = []

    def load(self, file_path: Path) -> ObjMesh:
        """
        Load an .obj file and return the parsed mesh.
        Parse errors propagate unchanged.
        """
        path = self.resolve_path(file_path)
        self._log(f"[INFO] Loading mesh: {path}")

        mesh = parse_file(path)

        self._log(
            f"[INFO] Parsed {len(mesh.positions)} positions, {len(mesh.texcoords)} texcoords, "
            f"{len(mesh.normals)} normals, {mesh.face_count} faces in {len(mesh.groups)} groups"
        )
        self.mesh = mesh
        self.path = path
        self.material_libraries = self.material_library_paths()
        return mesh

    def resolve_path(self, file_path: Path) -> Path:
        # 1. As given (absolute or relative to cwd)
        # 2. Relative to the asset directory
        path = Path(file_path)
        if path.exists():
            return path
        candidate = self.asset_dir / path
        if not path.is_absolute() and candidate.exists():
            return candidate
        raise FileNotFoundError(f"Could not find mesh file: {file_path}")

    def material_library_paths(self) -> List[Path]:
        """
        Paths of the material libraries referenced by the loaded mesh, resolved
        next to the .obj file. Their contents are not read here.
        """
        if self.mesh is None or self.path is None:
            raise RuntimeError("No mesh loaded")

        paths = []
        for lib in self.mesh.material_libraries:
            lib_path = self.path.parent / lib
            if not lib_path.exists():
                self._log(f"Warning: Could not find material library: {lib}")
            paths.append(lib_path)
        return paths

    def _log(self, message: str):
        if self.verbose:
            print(message)
