from pathlib import Path
import os

DEFAULT_GROUP_NAME = "Root"
DEFAULT_MATERIAL = "DefaultMaterial"

def get_asset_dir() -> Path:
    # Relative mesh paths that don't exist from the cwd are looked up here
    return Path(os.environ.get("OBJIMPORT_ASSET_PATH", "assets"))
