"""
paths.py – single source of truth for project folders.
           Import these constants everywhere.
"""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

# .env in the working directory may set KUKAI_ROOT, so load it before reading
load_dotenv(find_dotenv(usecwd=True))

# Try to get root from environment variable first
ROOT = os.environ.get('KUKAI_ROOT')
if ROOT:
    ROOT = Path(ROOT).resolve()
else:
    # Fallback: look for a marker file in parent directories, then the cwd
    current = Path(__file__).resolve()
    while current.parent != current:
        if any((current / marker).exists() for marker in ['.git', 'pyproject.toml', 'README.md']):
            ROOT = current
            break
        current = current.parent
    else:
        ROOT = Path.cwd().resolve()

DATA        = ROOT / "data"
SNAPSHOT_DIR = DATA / "snapshots"
OUTPUT_DIR  = ROOT / "outputs"
LOG_DIR     = ROOT / "logs"
CONFIG_DIR  = ROOT / "config"
PRESETS_FILE = CONFIG_DIR / "rule_presets.yaml"


def default_report_path(snapshot: Path) -> Path:
    """Return where the HTML results page for *snapshot* is written by default.

    ``data/snapshots/spring_2026.json`` maps to
    ``outputs/spring_2026_results.html``.
    """
    return OUTPUT_DIR / f"{Path(snapshot).stem}_results.html"
