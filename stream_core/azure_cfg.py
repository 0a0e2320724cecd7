# stream_core/azure_cfg.py
from __future__ import annotations
import os, json, pathlib
from dataclasses import dataclass
from openai import AzureOpenAI

_KEYS = {
    "endpoint":    "AZURE_OPENAI_ENDPOINT",
    "api_key":     "AZURE_OPENAI_API_KEY",
    "api_version": "AZURE_OPENAI_API_VERSION",
    "deployment":  "AZURE_OPENAI_DEPLOYMENT",
}

@dataclass(frozen=True)
class AzureSettings:
    endpoint: str
    api_key: str
    deployment: str
    api_version: str

def _read_file(path: str) -> dict[str, str]:
    p = pathlib.Path(path)
    if not p.exists(): return {}
    try:
        j = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return {field: str(j.get(field, "")) for field in _KEYS}

def settings(path: str = ".azure_config.json") -> AzureSettings:
    cfg = {field: os.getenv(env, "") for field, env in _KEYS.items()}
    if not all(cfg.values()):
        for k, v in _read_file(path).items():
            if not cfg.get(k): cfg[k] = v
    missing = [_KEYS[k] for k, v in cfg.items() if not v]
    if missing:
        raise RuntimeError(f"Azure OpenAI not configured. Missing: {', '.join(missing)}")
    return AzureSettings(**cfg)

def client(s: AzureSettings | None = None) -> AzureOpenAI:
    s = s or settings()
    return AzureOpenAI(
        azure_endpoint=s.endpoint,
        api_key=s.api_key,
        api_version=s.api_version,
    )
