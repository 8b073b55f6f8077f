"""Expense routes."""

from typing import List

from fastapi import APIRouter, Request, status

from bondpos.core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from bondpos.db.session import StoreDep
from bondpos.models import Expense
from bondpos.schemas.base import SuccessResponse
from bondpos.schemas.expense import ExpenseCreate, ExpenseResponse, ExpenseUpdate

router = APIRouter()


@router.get("", response_model=List[ExpenseResponse])
@limiter.limit(READ_LIMIT)
def list_expenses(request: Request, store: StoreDep):
    return store.expenses.list()


@router.get("/{expense_id}", response_model=ExpenseResponse)
@limiter.limit(READ_LIMIT)
def get_expense(request: Request, expense_id: str, store: StoreDep):
    return store.expenses.require(expense_id)


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(WRITE_LIMIT)
def create_expense(request: Request, data: ExpenseCreate, store: StoreDep):
    """Record an expense. The total is stored as sent."""
    return store.expenses.add(Expense(**data.model_dump()))


@router.patch("/{expense_id}", response_model=ExpenseResponse)
@limiter.limit(WRITE_LIMIT)
def update_expense(request: Request, expense_id: str, data: ExpenseUpdate, store: StoreDep):
    return store.expenses.patch(expense_id, **data.changes())


@router.delete("/{expense_id}", response_model=SuccessResponse)
@limiter.limit(WRITE_LIMIT)
def delete_expense(request: Request, expense_id: str, store: StoreDep):
    store.expenses.remove(expense_id)
    return {"success": True}
