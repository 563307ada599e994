import sys
from pathlib import Path

import matplotlib

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# No display during tests
matplotlib.use("Agg")
