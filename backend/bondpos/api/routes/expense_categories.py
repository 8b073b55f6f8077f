"""Expense category routes."""

from typing import List

from fastapi import APIRouter, Request, status

from bondpos.core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from bondpos.db.session import StoreDep
from bondpos.models import ExpenseCategory
from bondpos.schemas.base import SuccessResponse
from bondpos.schemas.expense import (
    ExpenseCategoryCreate,
    ExpenseCategoryResponse,
    ExpenseCategoryUpdate,
)

router = APIRouter()


@router.get("", response_model=List[ExpenseCategoryResponse])
@limiter.limit(READ_LIMIT)
def list_expense_categories(request: Request, store: StoreDep):
    return store.expense_categories.list()


@router.get("/{category_id}", response_model=ExpenseCategoryResponse)
@limiter.limit(READ_LIMIT)
def get_expense_category(request: Request, category_id: str, store: StoreDep):
    return store.expense_categories.require(category_id)


@router.post("", response_model=ExpenseCategoryResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(WRITE_LIMIT)
def create_expense_category(request: Request, data: ExpenseCategoryCreate, store: StoreDep):
    return store.expense_categories.add(ExpenseCategory(**data.model_dump()))


@router.patch("/{category_id}", response_model=ExpenseCategoryResponse)
@limiter.limit(WRITE_LIMIT)
def update_expense_category(
    request: Request, category_id: str, data: ExpenseCategoryUpdate, store: StoreDep
):
    return store.expense_categories.patch(category_id, **data.changes())


@router.delete("/{category_id}", response_model=SuccessResponse)
@limiter.limit(WRITE_LIMIT)
def delete_expense_category(request: Request, category_id: str, store: StoreDep):
    store.expense_categories.remove(category_id)
    return {"success": True}
