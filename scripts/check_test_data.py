"""
Run every case listed in test_data/manifest.json and report whether the
validator agrees with the expected outcome.

Usage:
    python scripts/check_test_data.py
"""

from pathlib import Path
import sys
import json

# Add src to path
sys.path.append(str(Path(__file__).parent.parent / "src"))

from objimport import validate_obj

def check_cases():
    base_dir = Path(__file__).parent.parent / "test_data"
    manifest = json.loads((base_dir / "manifest.json").read_text())
    failures = []

    print("\n=== VERIFYING TEST DATA ===")
    for case in manifest["test_cases"]:
        file_path = base_dir / case["file"]
        print(f"Testing {case['id']} {file_path.name}...", end=" ")

        result = validate_obj(file_path)
        if result.is_valid == case["expected_valid"]:
            print("PASS")
        else:
            print(f"FAIL (Errors: {[e.error_type for e in result.errors]})")
            failures.append(case["id"])

    if not failures:
        print("\n[SUCCESS] All cases matched.")
    else:
        print(f"\n[FAILURE] {len(failures)} cases failed: {failures}")
        sys.exit(1)

if __name__ == "__main__":
    check_cases()
