from __future__ import annotations
from fastapi import FastAPI, HTTPException, Body, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from datetime import datetime, timezone
import logging, os, typing as t

from stream_core.types import Answer, Quiz
from stream_core.recommend import evaluate
from stream_core.colleges import suggest_colleges
from stream_core.streams import STREAM_INFO, scoring_formulas
from stream_core.llm_bridge import ai_guidance, backend_in_use
from stream_core import college_directory, config, quiz_bank

log = logging.getLogger("api")

app = FastAPI(title="Stream Guidance API")

@app.get("/")
def root():
    return {"status": "ok", "service": "stream-guidance-api"}

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(config.CORS_ORIGINS),
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)

# ---- Schemas ----
class AnswerReq(BaseModel):
    questionId: int
    selectedOption: str | None = None
    timeSpent: int | None = Field(default=None, ge=0)   # seconds

class SubmitReq(BaseModel):
    quizId: int
    answers: list[AnswerReq] = []
    district: str | None = None
    classLevel: str | None = None

APTITUDE_INFO = {
    "Mathematical": "Problem-solving, arithmetic, numerical reasoning",
    "Verbal": "Reading comprehension, vocabulary, language skills",
    "Analytical": "Pattern recognition, logical reasoning, critical thinking",
    "Technical": "Science concepts, technical aptitude, applied knowledge",
}

# ---- Helpers ----
def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()

def _quiz_or_404(quiz_id: int) -> Quiz:
    quiz = quiz_bank.get_quiz(quiz_id)
    if quiz is None:
        raise HTTPException(404, f"quiz {quiz_id} not found")
    return quiz

def _serialize_quiz_summary(q: Quiz) -> dict[str, t.Any]:
    return {
        "id": q.id,
        "title": q.title,
        "description": q.description,
        "classLevel": q.class_level,
        "questionCount": len(q.questions),
    }

def _serialize_quiz(q: Quiz) -> dict[str, t.Any]:
    # answer key stays server-side
    out = _serialize_quiz_summary(q)
    out["questions"] = [
        {
            "id": it.id,
            "category": it.category_label or it.category.value,
            "question": it.text,
            "options": dict(it.options),
            "points": it.points,
        }
        for it in q.questions
    ]
    return out

def _result_payload(quiz: Quiz, req: SubmitReq) -> dict[str, t.Any]:
    answers = [Answer(question_id=a.questionId, selected_option=a.selectedOption, time_spent=a.timeSpent)
               for a in req.answers]
    rec = evaluate(quiz, answers)
    out = rec.to_dict()
    out.update({
        "quizId": quiz.id,
        "quizTitle": quiz.title,
        "completedAt": _now_iso(),
        "recommendedColleges": suggest_colleges(rec.percentage, req.district),
    })
    log.info("quiz %s scored %d/%d streams=%s", quiz.id, rec.total_score, rec.max_score, rec.recommended_streams)
    return out

# ---- Health ----
@app.get("/health")
def health():
    return {
        "llm_backend": backend_in_use(),
        "ai_guidance_enabled": config.AI_GUIDANCE_ENABLED,
        "azure_config_present": all(os.getenv(k) for k in [
            "AZURE_OPENAI_ENDPOINT","AZURE_OPENAI_API_KEY","AZURE_OPENAI_API_VERSION","AZURE_OPENAI_DEPLOYMENT"
        ])
    }

# ---- Quiz endpoints ----
@app.get("/api/quiz/available")
def available(class_level: str | None = Query(None, description="Class level, e.g. 10th or 12th")):
    quizzes = quiz_bank.quizzes_for_class(class_level or config.DEFAULT_CLASS_LEVEL)
    return {"quizzes": [_serialize_quiz_summary(q) for q in quizzes]}

@app.get("/api/quiz/categories")
def categories():
    return {
        "aptitudeTypes": APTITUDE_INFO,
        "streamInformation": STREAM_INFO,
        "scoringInfo": scoring_formulas(),
    }

@app.get("/api/quiz/{quiz_id}")
def get_quiz(quiz_id: int):
    return _serialize_quiz(_quiz_or_404(quiz_id))

@app.post("/api/quiz/submit")
def submit(payload: SubmitReq = Body(...)):
    quiz = _quiz_or_404(payload.quizId)
    return _result_payload(quiz, payload)

@app.post("/api/quiz/submit-with-ai")
def submit_with_ai(payload: SubmitReq = Body(...)):
    quiz = _quiz_or_404(payload.quizId)
    result = _result_payload(quiz, payload)
    profile = dict(result)
    profile["district"] = payload.district
    profile["classLevel"] = payload.classLevel
    return {"quizResult": result, "aiRecommendations": ai_guidance(profile)}

# ---- College directory ----
def _college_or_404(college_id: int):
    college = college_directory.get_college(college_id)
    if college is None:
        raise HTTPException(404, f"college {college_id} not found")
    return college

def _college_list(colleges) -> dict[str, t.Any]:
    return {"colleges": [college_directory.summary(c) for c in colleges], "count": len(colleges)}

@app.get("/api/college/search/district/{district}")
def colleges_by_district(district: str):
    return _college_list(college_directory.by_district(district))

@app.get("/api/college/search/state/{state}")
def colleges_by_state(state: str):
    return _college_list(college_directory.by_state(state))

@app.get("/api/college/government/district/{district}")
def government_colleges(district: str):
    return _college_list(college_directory.government_by_district(district))

@app.get("/api/college/search/stream/{stream}")
def colleges_by_stream(stream: str):
    return _college_list(college_directory.by_stream(stream))

@app.get("/api/college/search")
def search_colleges(
    district: str | None = None,
    state: str | None = None,
    type: str | None = Query(None, description="Government, Private, Deemed_University, ..."),
    stream: str | None = None,
):
    return _college_list(college_directory.search(district, state, type, stream))

@app.get("/api/college/details/{college_id}")
def college_details(college_id: int):
    return college_directory.details(_college_or_404(college_id))

@app.get("/api/college/recommendations")
def college_recommendations(stream: str, district: str | None = None, performance: str | None = None):
    return _college_list(college_directory.recommended(stream, district, performance))

@app.post("/api/college/compare")
def compare_colleges(ids: list[int] = Body(...)):
    if not ids:
        raise HTTPException(400, "no college ids given")
    return college_directory.compare([_college_or_404(i) for i in ids])
