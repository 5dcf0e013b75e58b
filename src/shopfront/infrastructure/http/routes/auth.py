"""Account creation and login."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from shopfront.application.issue_token import IssueTokenHandler
from shopfront.application.register_account import RegisterAccountHandler
from shopfront.infrastructure.bootstrap import Container
from shopfront.infrastructure.http.dependencies import get_container
from shopfront.infrastructure.http.schemas import AccountIn, CredentialsIn

router = APIRouter(tags=["Auth"])


@router.post("/account", status_code=201)
async def create_account(payload: AccountIn, container: Container = Depends(get_container)):
    handler = RegisterAccountHandler(container.users, container.hasher)
    await handler.handle(
        username=payload.username,
        firstname=payload.firstname,
        email=payload.email,
        password=payload.password,
    )
    return {"message": "Account created"}


@router.post("/token")
async def issue_token(payload: CredentialsIn, container: Container = Depends(get_container)):
    handler = IssueTokenHandler(container.users, container.hasher, container.tokens)
    token = await handler.handle(email=payload.email, password=payload.password)
    return {"token": token}
