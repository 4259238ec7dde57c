import sys
from pathlib import Path

# src/ và backend/ import theo tên module trần, giống backend/main.py
_goc = Path(__file__).parent.parent
for _thu_muc in (_goc / "src", _goc / "backend"):
    if str(_thu_muc) not in sys.path:
        sys.path.insert(0, str(_thu_muc))
