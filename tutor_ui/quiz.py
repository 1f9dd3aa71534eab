# Role: Quiz widget state machine. The active question is the first unanswered one; each answer is locked
# in as a QuizResult and moves the pointer forward. After the last answer the quiz is finished and the
# completion callback fires exactly once with the results in question order.

from __future__ import annotations

from typing import Callable, List, Optional

from tutor_backend.models.widget import QuizData, QuizQuestion, QuizResult

CompletionCallback = Callable[[List[QuizResult]], None]


class QuizFinishedError(RuntimeError):
    pass


class QuizSession:
    def __init__(self, data: QuizData, on_complete: Optional[CompletionCallback] = None) -> None:
        self.data = data
        self.results: List[QuizResult] = []
        self._on_complete = on_complete
        self._completion_fired = False

    @property
    def current_index(self) -> int:
        return len(self.results)

    @property
    def finished(self) -> bool:
        return len(self.results) >= len(self.data.questions)

    @property
    def current_question(self) -> Optional[QuizQuestion]:
        if self.finished:
            return None
        return self.data.questions[self.current_index]

    @property
    def score(self) -> int:
        return sum(1 for r in self.results if r.is_correct)

    def answer(self, answer_index: int) -> QuizResult:
        # 1) Reject answers after the terminal state
        # 2) Lock in the chosen answer for the active question
        # 3) On the last answer: finish and fire the callback once
        question = self.current_question
        if question is None:
            raise QuizFinishedError("Quiz is already finished.")
        if not 0 <= answer_index < len(question.answers):
            raise IndexError(f"answer index {answer_index} out of range for question {self.current_index}")

        chosen = question.answers[answer_index]
        result = QuizResult(
            question=question.title,
            user_answer=chosen.title,
            is_correct=chosen.is_correct,
            feedback=chosen.feedback,
        )
        self.results.append(result)

        if self.finished and not self._completion_fired:
            self._completion_fired = True
            if self._on_complete is not None:
                self._on_complete(list(self.results))

        return result


def build_quiz_report(title: str, results: List[QuizResult]) -> str:
    """Turn finished quiz results into the user message sent back to the tutor."""
    correct = sum(1 for r in results if r.is_correct)
    lines = [f'I finished the quiz "{title}". I scored {correct} out of {len(results)}.', ""]

    for number, r in enumerate(results, start=1):
        verdict = "correct" if r.is_correct else "incorrect"
        lines.append(f"{number}. {r.question}")
        lines.append(f"   My answer: {r.user_answer} ({verdict})")
        lines.append(f"   Feedback: {r.feedback}")

    lines.append("")
    if correct == len(results):
        lines.append("What should I learn next?")
    else:
        lines.append("Can you explain the questions I got wrong?")
    return "\n".join(lines)
