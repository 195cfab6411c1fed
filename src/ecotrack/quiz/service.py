"""Quiz question bank and attempt history."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

import structlog
from sqlalchemy import select

from ecotrack.db.models import QuizAnswer, QuizAttempt, QuizQuestion

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from ecotrack.quiz.schemas import AnswerInput, AttemptCreate, QuestionCreate

logger = structlog.get_logger()


def _build_answers(answers: list[AnswerInput]) -> list[QuizAnswer]:
    # A missing order_index falls back to the answer's position in the list
    built = [
        QuizAnswer(
            answer_text=a.answer_text,
            is_correct=a.is_correct,
            order_index=a.order_index if a.order_index is not None else index,
        )
        for index, a in enumerate(answers)
    ]
    return sorted(built, key=lambda a: a.order_index)


# ── Questions ──


async def list_active_questions(db: AsyncSession, limit: int = 10) -> list[QuizQuestion]:
    result = await db.execute(
        select(QuizQuestion)
        .where(QuizQuestion.is_active.is_(True))
        .order_by(QuizQuestion.created_at.desc())
        .limit(limit)
    )
    return list(result.scalars().all())


async def list_all_questions(db: AsyncSession) -> list[QuizQuestion]:
    result = await db.execute(select(QuizQuestion).order_by(QuizQuestion.created_at.desc()))
    return list(result.scalars().all())


async def get_question(db: AsyncSession, question_id: str) -> QuizQuestion | None:
    result = await db.execute(select(QuizQuestion).where(QuizQuestion.id == question_id))
    return result.scalar_one_or_none()


async def create_question(db: AsyncSession, data: QuestionCreate, created_by: str | None) -> QuizQuestion:
    now = datetime.now(timezone.utc)
    question = QuizQuestion(
        question_text=data.question_text,
        difficulty=data.difficulty,
        category=data.category,
        points=data.points,
        explanation=data.explanation,
        is_active=data.is_active,
        created_by=created_by,
        created_at=now,
        updated_at=now,
        answers=_build_answers(data.answers),
    )
    db.add(question)
    await db.flush()
    return question


async def update_question(
    db: AsyncSession,
    question: QuizQuestion,
    changes: dict[str, Any],
    answers: list[AnswerInput] | None = None,
) -> QuizQuestion:
    """Apply scalar changes; when ``answers`` is given the old answers are dropped."""
    for field, value in changes.items():
        setattr(question, field, value)
    if answers:
        question.answers = _build_answers(answers)
    question.updated_at = datetime.now(timezone.utc)
    await db.flush()
    return question


async def delete_question(db: AsyncSession, question: QuizQuestion) -> None:
    await db.delete(question)
    await db.flush()


# ── Attempts ──


async def submit_attempt(db: AsyncSession, user_id: str, data: AttemptCreate) -> QuizAttempt:
    """Store a finished quiz. Attempts are never modified afterwards."""
    attempt = QuizAttempt(
        user_id=user_id,
        score=data.score,
        total_questions=data.total_questions,
        correct_answers=data.correct_answers,
        time_taken=data.time_taken,
        answers=[a.model_dump() for a in data.answers],
        completed_at=datetime.now(timezone.utc),
    )
    db.add(attempt)
    await db.flush()
    logger.info(
        "quiz_attempt_submitted",
        user_id=user_id,
        correct=data.correct_answers,
        total=data.total_questions,
    )
    return attempt


async def list_attempts(db: AsyncSession, user_id: str, limit: int = 10) -> list[QuizAttempt]:
    result = await db.execute(
        select(QuizAttempt)
        .where(QuizAttempt.user_id == user_id)
        .order_by(QuizAttempt.completed_at.desc())
        .limit(limit)
    )
    return list(result.scalars().all())
