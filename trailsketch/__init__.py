from __future__ import annotations

from pathlib import Path
from pkgutil import extend_path

__path__ = extend_path(__path__, __name__)

# Lets a checkout import the package without an editable install.
_SRC_PACKAGE = Path(__file__).resolve().parent.parent / "src" / "trailsketch"
if _SRC_PACKAGE.is_dir() and str(_SRC_PACKAGE) not in __path__:
    __path__.insert(0, str(_SRC_PACKAGE))
