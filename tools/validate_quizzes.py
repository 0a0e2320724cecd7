from __future__ import annotations
from collections import Counter
import logging, sys
from stream_core.quiz_bank import load_quizzes
from stream_core.types import CANONICAL_CATEGORIES
from stream_core.validators import validate_quiz

def main() -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    bad = 0
    for quiz in load_quizzes():
        pts = Counter()
        for q in quiz.questions:
            pts[q.category] += q.points
        summary = ", ".join(f"{c.value}={pts[c]}" for c in CANONICAL_CATEGORIES)
        print(f"[{quiz.id}] {quiz.title}: {len(quiz.questions)} questions, {sum(pts.values())} pts ({summary})")
        for issue in validate_quiz(quiz):
            bad += 1
            logging.error(issue)
    if bad:
        print(f"{bad} issue(s) found.")
        return 1
    print("All quizzes valid.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
