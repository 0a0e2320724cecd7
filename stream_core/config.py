from __future__ import annotations
import os, json, pathlib


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


# stream selection
MIN_STREAM_MATCH: float = 0.4
TOP_STREAMS: int = 2

# percentage bands, high to low; inclusive lower bounds
PERFORMANCE_BANDS: tuple[tuple[float, str], ...] = (
    (85.0, "Excellent"),
    (70.0, "Very Good"),
    (55.0, "Good"),
    (40.0, "Average"),
)
PERFORMANCE_FLOOR: str = "Needs Improvement"

COLLEGE_TIER_BANDS: tuple[tuple[float, str], ...] = (
    (85.0, "Premier"),
    (70.0, "Tier-1"),
    (55.0, "Tier-2"),
    (40.0, "Tier-3"),
)
COLLEGE_TIER_FLOOR: str = "Foundation"

DEFAULT_DISTRICT: str = "Bangalore"
DEFAULT_CLASS_LEVEL: str = "12th"

AI_GUIDANCE_ENABLED: bool = True
AI_MAX_TOKENS: int = 1200

DEBUG_TRACE: bool = False
CORS_ORIGINS: tuple[str, ...] = ("*",)

# // env overrides for staging/ops; scoring constants stay fixed.
DEFAULT_DISTRICT = _env_str("DEFAULT_DISTRICT", DEFAULT_DISTRICT)
DEFAULT_CLASS_LEVEL = _env_str("DEFAULT_CLASS_LEVEL", DEFAULT_CLASS_LEVEL)
AI_GUIDANCE_ENABLED = _env_bool("AI_GUIDANCE_ENABLED", AI_GUIDANCE_ENABLED)
AI_MAX_TOKENS = _env_int("AI_MAX_TOKENS", AI_MAX_TOKENS)
DEBUG_TRACE = _env_bool("DEBUG_TRACE", False)
CORS_ORIGINS = tuple(o.strip() for o in _env_str("CORS_ORIGINS", ",".join(CORS_ORIGINS)).split(",") if o.strip())

def load_config() -> dict:
    cfg = {}
    p = pathlib.Path("config.json")
    if p.exists():
        try: cfg = json.loads(p.read_text(encoding="utf-8"))
        except (OSError, ValueError): cfg = {}
    e = os.environ
    if e.get("USE_LLM_GUIDANCE"): cfg["USE_LLM_GUIDANCE"] = _env_bool("USE_LLM_GUIDANCE", False)
    if e.get("LLM_BACKEND"): cfg["LLM_BACKEND"] = e.get("LLM_BACKEND")
    for k in ("AZURE_OPENAI_ENDPOINT","AZURE_OPENAI_API_VERSION","AZURE_OPENAI_API_KEY","AZURE_OPENAI_DEPLOYMENT"):
        if e.get(k): cfg[k] = e.get(k)
    return cfg
def get_backend(cfg: dict) -> str|None:
    if not AI_GUIDANCE_ENABLED or not cfg.get("USE_LLM_GUIDANCE"): return None
    b = (cfg.get("LLM_BACKEND") or "").lower().strip()
    return b if b == "azure" else None
