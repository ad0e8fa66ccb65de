"""Load builder options from a JSON file."""

import json
from pathlib import Path
from typing import Any

from persian_gd.errors import PersianGDError


def load_options(path: str | Path) -> dict[str, Any]:
    """
    Read a JSON object of builder options.
    
    Keys are passed through untouched; ``ImageBuilder.set_options``
    decides which ones it recognizes.
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise PersianGDError(f"Options file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise PersianGDError(f"Options file {path} is not valid JSON: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise PersianGDError(f"Options file {path} is not UTF-8 text: {exc}") from exc
    except OSError as exc:
        raise PersianGDError(f"Cannot read options file {path}: {exc}") from exc
    
    if not isinstance(raw, dict):
        raise PersianGDError(f"Options file {path} must contain a JSON object")
    return raw
