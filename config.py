import os
from pathlib import Path
import yaml
from dotenv import load_dotenv
from publisher.permalink import PERMALINK_ANY, PERMALINK_SCOPES

load_dotenv()

BASE = Path(__file__).resolve().parent
CONFIG_PATH = BASE / "config.yaml"

def load_config(path: str | Path | None = None) -> dict:
    """Read config.yaml (optional) and resolve settings; env vars win over the file."""
    path = Path(path) if path else CONFIG_PATH
    cfg = {}
    if path.exists():
        cfg = yaml.safe_load(path.read_text(encoding="utf-8")) or {}

    scope = os.getenv("PERMALINK_SCOPE") or (cfg.get("permalink") or {}).get("scope", PERMALINK_ANY)
    scope = str(scope).strip().lower()
    if scope not in PERMALINK_SCOPES:
        raise ValueError(
            f"PERMALINK_SCOPE must be one of {', '.join(PERMALINK_SCOPES)}, got {scope!r}."
        )
    cfg["permalink_scope"] = scope
    return cfg
