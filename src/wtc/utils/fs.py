from __future__ import annotations
from pathlib import Path

TEXT_EXTS = {".txt", ".md", ".markdown", ".text"}

def iter_files(target: str, recursive: bool = True) -> list[Path]:
    p = Path(target)
    if p.is_file():
        return [p]
    if not p.is_dir():
        return []

    pattern = p.rglob("*") if recursive else p.glob("*")
    return sorted(fp for fp in pattern if fp.is_file() and fp.suffix.lower() in TEXT_EXTS)

def read_text_file(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")

def output_name(path: Path) -> str:
    return path.name.replace(".", "_") + ".json"
