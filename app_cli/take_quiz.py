from __future__ import annotations
import argparse, logging
from stream_core.types import Answer
from stream_core.quiz_bank import load_quizzes, get_quiz
from stream_core.recommend import evaluate
from stream_core.colleges import suggest_colleges
def ask(prompt: str, options: dict) -> str:
    print(prompt)
    for k, v in sorted(options.items()): print(f"  [{k}] {v}")
    while True:
        v = input("Your choice (A-D, blank to skip): ").strip().upper()
        if not v or v in options: return v
        print("Enter one of the listed letters.")
def main(argv=None):
    ap = argparse.ArgumentParser(description="Take a stream guidance quiz in the terminal.")
    ap.add_argument("--quiz", type=int, default=None, help="quiz id (default: pick from list)")
    ap.add_argument("--district", default=None)
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    quiz = get_quiz(args.quiz) if args.quiz is not None else None
    if quiz is None:
        quizzes = load_quizzes()
        for q in quizzes: print(f"  [{q.id}] {q.title} ({len(q.questions)} questions)")
        while quiz is None:
            v = input("Quiz id: ").strip()
            if v.isdigit(): quiz = get_quiz(int(v))
    print(f"\n{quiz.title}\n{quiz.description}\n")
    answers = []
    for i, q in enumerate(quiz.questions, 1):
        v = ask(f"Q{i}. {q.text}", q.options)
        answers.append(Answer(question_id=q.id, selected_option=v or None))
    rec = evaluate(quiz, answers)
    print(f"\nScore: {rec.total_score}/{rec.max_score} ({rec.percentage:.1f}%)  {rec.performance_level}, {rec.college_tier}")
    print("Recommended streams:")
    for s in rec.recommended_streams: print(f"  - {s}")
    print("Colleges to look at:")
    for c in suggest_colleges(rec.percentage, args.district): print(f"  - {c}")
if __name__ == "__main__": main()
