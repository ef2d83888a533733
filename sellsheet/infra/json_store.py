"""Small JSON file helpers shared by the repositories."""
import json
import os
import shutil
import tempfile
from pathlib import Path


def read_json(path: Path):
    '''Load a JSON document. FileNotFoundError and JSONDecodeError propagate to the caller.'''
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def atomic_write_json(path: Path, data) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.stem}_", suffix=".json")
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as tmp:
            json.dump(data, tmp, indent=2, ensure_ascii=False)
        shutil.move(tmp_path, path)
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
