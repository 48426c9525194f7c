from pathlib import Path
import sys
import argparse

# Add src to path to allow importing the objimport package
sys.path.append(str(Path(__file__).parent.parent / "src"))

from objimport import validate_obj, Loader
from objimport.scene_graph import MeshIndex, describe_bounds, DEFAULT_TOLERANCE

def main():
    parser = argparse.ArgumentParser(description="Validate a Wavefront .obj mesh file.")
    parser.add_argument("file", type=str, help="Path to the .obj file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")
    parser.add_argument("--dump", action="store_true", help="Print the parsed vertex data and groups")
    parser.add_argument("--bounds", action="store_true", help="Print mesh and per-group bounding boxes")
    parser.add_argument("--near", type=float, nargs=3, metavar=("X", "Y", "Z"),
                        help="List the faces whose bounds touch this point")
    parser.add_argument("--tolerance", type=float, default=DEFAULT_TOLERANCE,
                        help="Search radius for --near")
    args = parser.parse_args()

    file_path = Path(args.file)
    if not file_path.exists():
        print(f"Error: File {file_path} does not exist.")
        sys.exit(1)

    print(f"Validating {file_path}...")
    result = validate_obj(file_path)

    if result.is_valid:
        print(f"PASS: {file_path.name} is valid.")
    else:
        print(f"FAIL: {file_path.name} has {len(result.errors)} errors:")
        for err in result.errors:
            print(f"  - [{err.error_type.upper()}] {err.message}")
            if args.verbose and err.group_names:
                print(f"    Affected groups: {err.group_names}")

    # A mesh that failed to parse has nothing to report on
    parsed = not any(e.error_type == "parse_error" for e in result.errors)
    if parsed and (args.verbose or args.dump or args.bounds or args.near):
        # verbose loading also reports missing material libraries
        mesh = Loader(verbose=args.verbose).load(file_path)
        if args.dump:
            print(mesh.dump(), end="")
        if args.bounds:
            print(describe_bounds(mesh), end="")
        if args.near:
            hits = MeshIndex(mesh).faces_near(tuple(args.near), args.tolerance)
            print(f"{len(hits)} faces near {tuple(args.near)}:")
            for group_name, face in hits:
                print(f"  - {group_name}: {face.positions}")

    if not result.is_valid:
        sys.exit(1)

if __name__ == "__main__":
    main()
