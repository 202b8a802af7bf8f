import os
from pathlib import Path
from typing import Optional

def to_abs_path(p: Optional[str | os.PathLike]) -> Optional[Path]:
    """Convert p to an absolute path.
    Sequence:
      1) Absolute: expanduser+resolve
      2) Relative to CWD
    Chart files are always written relative to where the tool runs, never
    next to the package.
    """
    if not p:
        return None
    pp = Path(p).expanduser()
    if pp.is_absolute():
        return pp.resolve()
    return (Path.cwd() / pp).resolve()

def artifact_path(out_dir: Path, port: int, direction_name: str) -> Path:
    return Path(out_dir) / f"{port}-{direction_name}.png"
