"""Put src/ on the import path so tests resolve the top-level packages."""

import sys
from pathlib import Path


def pytest_configure() -> None:
    """Insert the src directory ahead of site-packages."""
    src_path = Path(__file__).resolve().parents[1] / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))
