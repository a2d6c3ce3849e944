import sys
from pathlib import Path

root = Path(__file__).resolve().parents[1]
src = root / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

import pytest


@pytest.fixture()
def temp_workspace(tmp_path: Path) -> Path:
    (tmp_path / "configs").mkdir(parents=True, exist_ok=True)
    (tmp_path / "dist").mkdir(parents=True, exist_ok=True)
    return tmp_path


@pytest.fixture()
def sample_bundle() -> dict[str, object]:
    return {
        "assets/index.js": {"code": "x" * 1024},
        "assets/index.css": {"source": "y" * 2048},
        "assets/logo.png": {"source": b"\x89PNG" + b"\x00" * 508},
    }
