"""Schemas for quiz questions and attempts."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field, model_validator

from ecotrack.schemas import ORMModel, RequestModel

Difficulty = Literal["easy", "medium", "hard"]


# ---------------------------------------------------------------------------
# Questions
# ---------------------------------------------------------------------------


class AnswerInput(RequestModel):
    answer_text: str = Field(..., min_length=1)
    is_correct: bool = False
    order_index: int | None = Field(None, ge=0)


class QuestionCreate(RequestModel):
    question_text: str = Field(..., min_length=1)
    difficulty: Difficulty
    category: str = Field(..., min_length=1, max_length=64)
    points: int = Field(10, ge=0)
    explanation: str | None = None
    is_active: bool = True
    answers: list[AnswerInput] = Field(..., min_length=2)


class QuestionUpdate(RequestModel):
    """Partial update. A non-empty ``answers`` list replaces every answer."""

    question_text: str | None = Field(None, min_length=1)
    difficulty: Difficulty | None = None
    category: str | None = Field(None, min_length=1, max_length=64)
    points: int | None = Field(None, ge=0)
    explanation: str | None = None
    is_active: bool | None = None
    answers: list[AnswerInput] | None = Field(None, min_length=2)


class AnswerResponse(ORMModel):
    id: str
    answer_text: str
    is_correct: bool
    order_index: int


class QuestionResponse(ORMModel):
    id: str
    question_text: str
    difficulty: str
    category: str
    points: int
    explanation: str | None = None
    answers: list[AnswerResponse]


class AdminQuestionResponse(QuestionResponse):
    is_active: bool
    created_by: str | None = None
    created_at: datetime
    updated_at: datetime


# ---------------------------------------------------------------------------
# Attempts
# ---------------------------------------------------------------------------


class AttemptAnswer(RequestModel):
    question_id: str
    answer_id: str
    is_correct: bool


class AttemptCreate(RequestModel):
    score: int = Field(0, ge=0)
    total_questions: int = Field(..., ge=0)
    correct_answers: int = Field(0, ge=0)
    time_taken: int | None = Field(None, ge=0)
    answers: list[AttemptAnswer] = Field(default_factory=list)

    @model_validator(mode="after")
    def correct_within_total(self) -> AttemptCreate:
        if self.correct_answers > self.total_questions:
            msg = "correct_answers cannot exceed total_questions"
            raise ValueError(msg)
        return self


class AttemptResponse(ORMModel):
    """A stored attempt as returned right after submission."""

    id: str
    user_id: str
    score: int
    total_questions: int
    correct_answers: int
    time_taken: int | None = None
    answers: list[dict]
    completed_at: datetime


class AttemptSummary(ORMModel):
    """History row. ``score`` is the number of correct answers."""

    id: str
    score: int
    total_questions: int
    completed_at: datetime
