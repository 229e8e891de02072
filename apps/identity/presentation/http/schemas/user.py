"""User-related HTTP schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class CreateUserRequest(BaseModel):
    """가입 요청 스키마.

    provider가 local이면 external_id/password, 소셜이면 access_token이 필요합니다.
    """

    provider: str = Field(..., description="계정 출처 (local, kakao, naver, google)")
    external_id: str | None = Field(None, min_length=1, max_length=64, description="로그인 아이디")
    password: str | None = Field(None, min_length=1, max_length=128, description="비밀번호")
    access_token: str | None = Field(None, min_length=1, description="소셜 액세스 토큰")
    nickname: str = Field(..., min_length=1, max_length=120, description="닉네임")
    age: int | None = Field(None, ge=0, le=150, description="나이")
    gender: str | None = Field(None, max_length=20, description="성별")
    phone_number: str | None = Field(None, max_length=20, description="전화번호")
    profile_image_url: str | None = Field(None, description="프로필 이미지 URL")
    push_token: str | None = Field(None, description="푸시 알림 토큰")


class SignInRequest(BaseModel):
    """로그인 요청 스키마."""

    provider: str = Field(..., description="계정 출처 (local, kakao, naver, google)")
    external_id: str | None = Field(None, min_length=1, max_length=64, description="로그인 아이디")
    password: str | None = Field(None, max_length=128, description="비밀번호")
    access_token: str | None = Field(None, min_length=1, description="소셜 액세스 토큰")


class UpdateUserRequest(BaseModel):
    """프로필 수정 요청 스키마 (전체 교체)."""

    nickname: str = Field(..., min_length=1, max_length=120, description="닉네임")
    age: int | None = Field(None, ge=0, le=150, description="나이")
    gender: str | None = Field(None, max_length=20, description="성별")
    phone_number: str | None = Field(None, max_length=20, description="전화번호")
    profile_image_url: str | None = Field(None, description="프로필 이미지 URL")


class UserResponse(BaseModel):
    """계정 응답 스키마."""

    id: UUID = Field(..., description="사용자 ID")
    external_id: str = Field(..., description="외부 ID")
    provider: str = Field(..., description="계정 출처")
    nickname: str = Field(..., description="닉네임")
    age: int | None = Field(None, description="나이")
    gender: str | None = Field(None, description="성별")
    phone_number: str | None = Field(None, description="전화번호")
    profile_image_url: str | None = Field(None, description="프로필 이미지 URL")
    push_token: str | None = Field(None, description="푸시 알림 토큰")
    created_at: datetime = Field(..., description="생성 시각")
    updated_at: datetime = Field(..., description="수정 시각")

    model_config = {"from_attributes": True}


class SignInResponse(BaseModel):
    """로그인 응답 스키마."""

    user: UserResponse = Field(..., description="계정 정보")
    access_token: str = Field(..., description="액세스 토큰")
    token_type: str = Field("Bearer", description="토큰 타입")

    model_config = {"from_attributes": True}


class StarRatingResponse(BaseModel):
    """별점 응답 스키마."""

    id: UUID = Field(..., description="별점 ID")
    user_id: UUID = Field(..., description="사용자 ID")
    item_id: str = Field(..., description="평가 대상 ID")
    score: float = Field(..., description="점수")
    created_at: datetime = Field(..., description="작성 시각")

    model_config = {"from_attributes": True}
