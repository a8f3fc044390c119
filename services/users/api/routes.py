from __future__ import annotations

from typing import List

from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from services.users.application.create_user import CreateUserUseCase
from services.users.application.delete_user import DeleteUserUseCase
from services.users.application.dto import CreateUserCommand, UpdateUserCommand
from services.users.application.get_user import GetUserUseCase
from services.users.application.list_users import ListUsersUseCase
from services.users.application.update_user import UpdateUserUseCase
from services.users.domain.user import User


class UserRequest(BaseModel):
    name: str
    email: str


class UserResponse(BaseModel):
    id: int
    name: str
    email: str

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(id=user.user_id, name=user.name, email=user.email)


def create_router(
    list_users_use_case: ListUsersUseCase,
    get_user_use_case: GetUserUseCase,
    create_user_use_case: CreateUserUseCase,
    update_user_use_case: UpdateUserUseCase,
    delete_user_use_case: DeleteUserUseCase,
    *,
    prefix: str = "/api",
) -> APIRouter:
    router = APIRouter()
    users_router = APIRouter(prefix=f"{prefix}/users", tags=["users"])

    @users_router.get("", response_model=List[UserResponse])
    async def list_users_endpoint():
        users = list_users_use_case.execute()
        return [UserResponse.from_domain(user) for user in users]

    @users_router.get("/{user_id}", response_model=UserResponse)
    async def get_user_endpoint(user_id: int):
        return UserResponse.from_domain(get_user_use_case.execute(user_id))

    @users_router.post("", response_model=UserResponse, status_code=201)
    async def create_user_endpoint(payload: UserRequest):
        command = CreateUserCommand(name=payload.name, email=payload.email)
        user = create_user_use_case.execute(command)
        return UserResponse.from_domain(user)

    @users_router.put("/{user_id}", response_model=UserResponse)
    async def update_user_endpoint(user_id: int, payload: UserRequest):
        command = UpdateUserCommand(
            user_id=user_id,
            name=payload.name,
            email=payload.email,
        )
        user = update_user_use_case.execute(command)
        return UserResponse.from_domain(user)

    @users_router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_user_endpoint(user_id: int):
        delete_user_use_case.execute(user_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    router.include_router(users_router)

    return router
