import sys
from pathlib import Path


# Pytest 8 defaults to `--import-mode=importlib`, which does not prepend the
# repository root to `sys.path`. Add it so `import rspath` works without an
# editable install.
REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))
