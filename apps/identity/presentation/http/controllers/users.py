"""Users controller - Account endpoints."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from apps.identity.application.commands import (
    CreateUserInteractor,
    DeleteUserInteractor,
    SignInInteractor,
    UpdateUserInteractor,
)
from apps.identity.application.identity.dto import (
    UserCreateRequest,
    UserSignInRequest,
    UserUpdate,
)
from apps.identity.application.queries import (
    GetStarRatingsQuery,
    GetUserQuery,
    ValidateUserIdQuery,
)
from apps.identity.domain.value_objects import MAX_PAGE_SIZE, PageRequest
from apps.identity.presentation.http.schemas import (
    CreateUserRequest,
    SignInRequest,
    SignInResponse,
    StarRatingResponse,
    UpdateUserRequest,
    UserResponse,
)
from apps.identity.setup.dependencies import (
    get_create_user_interactor,
    get_delete_user_interactor,
    get_get_star_ratings_query,
    get_get_user_query,
    get_sign_in_interactor,
    get_update_user_interactor,
    get_validate_user_id_query,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserRequest,
    interactor: CreateUserInteractor = Depends(get_create_user_interactor),
) -> UserResponse:
    """계정을 생성합니다."""
    result = await interactor.execute(UserCreateRequest(**request.model_dump()))
    return UserResponse.model_validate(result)


@router.post("/signin", response_model=SignInResponse)
async def sign_in(
    request: SignInRequest,
    interactor: SignInInteractor = Depends(get_sign_in_interactor),
) -> SignInResponse:
    """로그인하고 액세스 토큰을 발급합니다."""
    result = await interactor.execute(UserSignInRequest(**request.model_dump()))
    return SignInResponse.model_validate(result)


@router.get("/validate", status_code=status.HTTP_204_NO_CONTENT)
async def validate_user_id(
    external_id: str = Query(..., alias="userId", min_length=1, max_length=64),
    query: ValidateUserIdQuery = Depends(get_validate_user_id_query),
) -> Response:
    """로그인 아이디 사용 가능 여부를 확인합니다."""
    await query.execute(external_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID,
    query: GetUserQuery = Depends(get_get_user_query),
) -> UserResponse:
    """계정을 조회합니다."""
    result = await query.execute(user_id)
    return UserResponse.model_validate(result)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    interactor: UpdateUserInteractor = Depends(get_update_user_interactor),
) -> UserResponse:
    """프로필을 수정합니다."""
    result = await interactor.execute(user_id, UserUpdate(**request.model_dump()))
    return UserResponse.model_validate(result)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: UUID,
    interactor: DeleteUserInteractor = Depends(get_delete_user_interactor),
) -> Response:
    """계정을 삭제합니다."""
    await interactor.execute(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}/star-ratings", response_model=list[StarRatingResponse])
async def get_star_ratings(
    user_id: UUID,
    page: int = Query(0, ge=0),
    size: int = Query(20, ge=1, le=MAX_PAGE_SIZE),
    query: GetStarRatingsQuery = Depends(get_get_star_ratings_query),
) -> list[StarRatingResponse]:
    """사용자의 별점 목록을 조회합니다."""
    ratings = await query.execute(user_id, PageRequest(page=page, size=size))
    return [StarRatingResponse.model_validate(rating) for rating in ratings]
