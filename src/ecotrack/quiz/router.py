"""Quiz router: /api/quiz/questions and /api/quiz/attempts."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ecotrack.auth.dependencies import get_current_user, require_admin
from ecotrack.database import get_session
from ecotrack.db.models import User
from ecotrack.quiz import service
from ecotrack.quiz.schemas import (
    AdminQuestionResponse,
    AttemptCreate,
    AttemptResponse,
    AttemptSummary,
    QuestionCreate,
    QuestionResponse,
    QuestionUpdate,
)
from ecotrack.schemas import ApiResponse, ok, ok_list

router = APIRouter(prefix="/api/quiz", tags=["Quiz"], dependencies=[Depends(get_current_user)])

_NOT_FOUND = "Question not found"


# ── Player endpoints ──


@router.get("/questions", response_model=ApiResponse[list[QuestionResponse]])
async def get_questions(
    limit: int = Query(10, ge=1, le=100),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    """Active questions, newest first, with their answers."""
    questions = await service.list_active_questions(db, limit)
    return ok_list([QuestionResponse.model_validate(q) for q in questions])


@router.post("/attempts", response_model=ApiResponse[AttemptResponse], status_code=201)
async def submit_attempt(
    body: AttemptCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    attempt = await service.submit_attempt(db, user.id, body)
    await db.commit()
    return ok(AttemptResponse.model_validate(attempt))


@router.get("/attempts", response_model=ApiResponse[list[AttemptSummary]])
async def get_attempts(
    limit: int = Query(10, ge=1, le=100),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    """Own attempt history, newest first."""
    attempts = await service.list_attempts(db, user.id, limit)
    return ok_list(
        [
            AttemptSummary(
                id=a.id,
                score=a.correct_answers,
                total_questions=a.total_questions,
                completed_at=a.completed_at,
            )
            for a in attempts
        ]
    )


# ── Admin endpoints ──


@router.get(
    "/questions/all",
    response_model=ApiResponse[list[AdminQuestionResponse]],
    dependencies=[Depends(require_admin)],
)
async def get_all_questions(db: AsyncSession = Depends(get_session)) -> ApiResponse:
    questions = await service.list_all_questions(db)
    return ok_list([AdminQuestionResponse.model_validate(q) for q in questions])


@router.post("/questions", response_model=ApiResponse[AdminQuestionResponse], status_code=201)
async def create_question(
    body: QuestionCreate,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    question = await service.create_question(db, body, created_by=admin.id)
    await db.commit()
    return ok(AdminQuestionResponse.model_validate(question))


@router.put(
    "/questions/{question_id}",
    response_model=ApiResponse[AdminQuestionResponse],
    dependencies=[Depends(require_admin)],
)
async def update_question(
    question_id: str,
    body: QuestionUpdate,
    db: AsyncSession = Depends(get_session),
) -> ApiResponse:
    question = await service.get_question(db, question_id)
    if question is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    changes = body.changes("explanation")
    changes.pop("answers", None)
    question = await service.update_question(db, question, changes, body.answers)
    await db.commit()
    return ok(AdminQuestionResponse.model_validate(question))


@router.delete(
    "/questions/{question_id}",
    response_model=ApiResponse[dict],
    dependencies=[Depends(require_admin)],
)
async def delete_question(question_id: str, db: AsyncSession = Depends(get_session)) -> ApiResponse:
    question = await service.get_question(db, question_id)
    if question is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    await service.delete_question(db, question)
    await db.commit()
    return ok({})
