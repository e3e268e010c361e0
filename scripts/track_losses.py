from __future__ import annotations

import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))
from main import main


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
