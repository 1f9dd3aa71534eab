# Role: Structured widgets produced from provider tool calls (quiz, coding challenge).
# Widget is a tagged union on "type"; the endpoint builds it, the UI renders it.
# Wire names are camelCase (isCorrect, userAnswer); Python attributes are snake_case.

from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator


class QuizAnswer(BaseModel):
    title: str
    feedback: str
    is_correct: bool = Field(..., alias="isCorrect")

    model_config = {"populate_by_name": True}


class QuizQuestion(BaseModel):
    title: str
    answers: List[QuizAnswer] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _check_has_correct_answer(self):
        # The provider is asked for exactly one correct answer; we only insist on at least one.
        if not any(answer.is_correct for answer in self.answers):
            raise ValueError(f"question {self.title!r} has no correct answer")
        return self


class QuizData(BaseModel):
    title: str
    questions: List[QuizQuestion] = Field(..., min_length=1)


class QuizResult(BaseModel):
    question: str
    user_answer: str = Field(..., alias="userAnswer")
    is_correct: bool = Field(..., alias="isCorrect")
    feedback: str

    model_config = {"populate_by_name": True}


class FileData(BaseModel):
    name: str
    language: str
    content: str


class ChallengeData(BaseModel):
    title: str
    description: str
    # Absent on first issuance, present when the provider reviews a submission.
    feedback: Optional[str] = None
    files: List[FileData] = Field(..., min_length=1)


class QuizWidget(BaseModel):
    type: Literal["quiz"] = "quiz"
    data: QuizData


class CodingChallengeWidget(BaseModel):
    type: Literal["coding_challenge"] = "coding_challenge"
    data: ChallengeData


Widget = Annotated[Union[QuizWidget, CodingChallengeWidget], Field(discriminator="type")]
