from __future__ import annotations
import json, logging, os, time
from typing import Any, Dict, List
from . import config
from .azure_cfg import client as azure_client, settings as azure_settings

log = logging.getLogger(__name__)

_SYSTEM = ("You are an expert educational counselor for Indian secondary students. "
           "Reply with ONLY one JSON object, no prose.")

def backend_in_use() -> str:
    return config.get_backend(config.load_config()) or "none"

def build_guidance_prompt(profile: Dict[str, Any]) -> str:
    streams = profile.get("recommendedStreams") or []
    lines = [
        "Based on the following student profile, provide college and career guidance in India.",
        "",
        "Student Profile:",
        f"- Quiz: {profile.get('quizTitle', 'Aptitude quiz')}",
        f"- Score: {profile.get('totalScore')}/{profile.get('maxScore')} ({float(profile.get('percentage') or 0):.1f}%)",
        f"- Performance level: {profile.get('performanceLevel')}",
        f"- Recommended streams: {', '.join(streams) or 'none'}",
        f"- Strongest aptitude: {(profile.get('scoreBreakdown') or {}).get('dominantAptitude', 'unknown')}",
        f"- District: {profile.get('district') or config.DEFAULT_DISTRICT}",
        f"- Class: {profile.get('classLevel') or config.DEFAULT_CLASS_LEVEL}",
        "",
        "Use exactly this JSON shape:",
        '{"topColleges": [{"name": "", "location": "", "type": "Government/Private", '
        '"coursesRecommended": [""], "whyRecommended": ""}], '
        '"entranceExams": [{"examName": "", "eligibility": "", "preparationTips": ""}], '
        '"actionPlan": {"immediate": [""], "next6Months": [""], "nextYear": [""]}}',
        "",
        "Recommend colleges where the student has a realistic chance of admission and mix government and private institutions.",
    ]
    return "\n".join(lines)

def extract_json(text: str) -> Dict[str, Any]:
    start = text.find("{"); end = text.rfind("}")
    body = text[start:end + 1] if start != -1 and end > start else text
    data = json.loads(body)
    if not isinstance(data, dict):
        raise ValueError("guidance reply is not a JSON object")
    return data

def _stream_names(profile: Dict[str, Any]) -> List[str]:
    names = []
    for s in profile.get("recommendedStreams") or []:
        name = str(s).split(" (", 1)[0].strip()
        if name and name not in names: names.append(name)
    return names or ["Arts"]

_COURSES = {
    "Science": ["B.Sc Physics", "B.Tech", "MBBS"],
    "Commerce": ["B.Com", "BBA", "CA Foundation"],
    "Arts": ["BA English", "BA Psychology", "BA LLB"],
}
_EXAMS = {
    "Science": {"examName": "JEE Main / NEET", "eligibility": "Class 12 with PCM / PCB",
                "preparationTips": "Practise previous years' papers on a weekly schedule."},
    "Commerce": {"examName": "CUET / CA Foundation", "eligibility": "Class 12, any stream with Mathematics preferred",
                 "preparationTips": "Revise accountancy and quantitative aptitude daily."},
    "Arts": {"examName": "CUET / CLAT", "eligibility": "Class 12, any stream",
             "preparationTips": "Read editorials daily and take timed comprehension tests."},
}

def fallback_guidance(profile: Dict[str, Any]) -> Dict[str, Any]:
    streams = _stream_names(profile)
    place = profile.get("district") or config.DEFAULT_DISTRICT
    courses = [c for s in streams for c in _COURSES.get(s, [])]
    return {
        "source": "fallback",
        "topColleges": [{
            "name": "Delhi University",
            "location": "Delhi",
            "type": "Government",
            "coursesRecommended": courses[:3],
            "whyRecommended": "Excellent reputation and affordable fees",
        }] + [{
            "name": c,
            "location": place,
            "type": "Government",
            "coursesRecommended": courses[:2],
            "whyRecommended": "Close to home with merit-based admission",
        } for c in profile.get("recommendedColleges") or []],
        "entranceExams": [_EXAMS[s] for s in streams if s in _EXAMS],
        "actionPlan": {
            "immediate": ["Research colleges", "Prepare for entrance exams"],
            "next6Months": ["Apply to colleges", "Focus on studies"],
            "nextYear": ["Start college", "Build network"],
        },
    }

def _ask_azure(prompt: str) -> str:
    s = azure_settings(); cli = azure_client(s)
    resp = cli.chat.completions.create(
        model=s.deployment,
        messages=[{"role": "system", "content": _SYSTEM}, {"role": "user", "content": prompt}],
        temperature=0.7, max_tokens=config.AI_MAX_TOKENS,
    )
    return resp.choices[0].message.content or "{}"

def _log_call(backend: str, prompt: str, raw: Any, t0: float) -> None:
    try:
        rec = {
            "ts": round(time.time(), 3),
            "backend": backend,
            "prompt": prompt[:800],
            "raw": raw,
            "rt_ms": int((time.time() - t0) * 1000),
        }
        with open(os.getenv("LLM_LOG_PATH", "llm_guidance_log.jsonl"), "a", encoding="utf-8") as f:
            f.write(json.dumps(rec, ensure_ascii=False) + "\n")
    except OSError as exc:
        log.debug("guidance log write failed: %s", exc)

def ai_guidance(profile: Dict[str, Any]) -> Dict[str, Any]:
    backend = backend_in_use()
    if backend != "azure":
        return fallback_guidance(profile)
    t0 = time.time()
    prompt = build_guidance_prompt(profile)
    raw: Any = None
    try:
        raw = _ask_azure(prompt)
        out = extract_json(raw)
    except Exception as exc:  # any failure falls back
        log.warning("AI guidance fell back: %s", exc)
        _log_call(backend, prompt, {"error": str(exc)}, t0)
        return fallback_guidance(profile)
    _log_call(backend, prompt, raw, t0)
    out["source"] = backend
    return out
