import sys
from pathlib import Path

# Add repository root to PYTHONPATH so tests run from a plain checkout
sys.path.append(str(Path(__file__).resolve().parents[1]))
