"""Locate the Typhoon workspace that holds build output and the SDK tree."""

from pathlib import Path
from typing import Optional

IDL_DIR = Path("target", "idl")
SDK_DIR = Path("sdk")
TYPHOON_TOML = "typhoon.toml"
CARGO_TOML = "Cargo.toml"


def _is_workspace(path: Path) -> bool:
    if (path / TYPHOON_TOML).exists():
        return True
    cargo = path / CARGO_TOML
    if not cargo.is_file():
        return False
    try:
        return "[workspace]" in cargo.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return False


def find_workspace_root(start: Optional[Path] = None) -> Optional[Path]:
    """Nearest ancestor of start (cwd by default) with typhoon.toml or a workspace Cargo.toml."""
    path = Path(start or Path.cwd()).resolve()
    for candidate in (path, *path.parents):
        if _is_workspace(candidate):
            return candidate
    return None
