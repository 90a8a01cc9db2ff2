"""
Routes d'authentification / Authentication routes.
Inscription, connexion, profil utilisateur.
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from fuel_tracker.api.deps import get_current_user
from fuel_tracker.config import settings
from fuel_tracker.database import get_db
from fuel_tracker.exceptions import AuthenticationError, DuplicateResourceError
from fuel_tracker.models.user import User
from fuel_tracker.rate_limit import limiter
from fuel_tracker.repositories import user_repository
from fuel_tracker.schemas.auth import AuthRequest, AuthResponse, UserMe
from fuel_tracker.utils.auth import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)

router = APIRouter()


def _client_ip(request: Request) -> str:
    """Extraire l'IP client / Extract client IP (supports X-Forwarded-For behind proxy)."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.RATE_LIMIT_REGISTER)
async def register(request: Request, data: AuthRequest, db: AsyncSession = Depends(get_db)):
    """Inscription / Register a new user."""
    if await user_repository.username_exists(db, data.username):
        raise DuplicateResourceError("Username already exists")

    user = User(username=data.username, hashed_password=hash_password(data.password), role="USER")
    db.add(user)
    await db.flush()
    logger.info("User %s registered from %s", user.username, _client_ip(request))

    return AuthResponse(
        token=create_access_token(user.id, user.username),
        username=user.username,
        message="Registration successful",
    )


@router.post("/login", response_model=AuthResponse)
@limiter.limit(settings.RATE_LIMIT_LOGIN)
async def login(request: Request, data: AuthRequest, db: AsyncSession = Depends(get_db)):
    """Connexion par identifiants / Login with credentials."""
    user = await user_repository.get_by_username(db, data.username)
    if user is None or not user.is_active or not verify_password(data.password, user.hashed_password):
        logger.warning("Failed login for %s from %s", data.username, _client_ip(request))
        raise AuthenticationError("Invalid username or password")

    return AuthResponse(token=create_access_token(user.id, user.username), username=user.username)


@router.get("/me", response_model=UserMe)
async def me(user: User = Depends(get_current_user)):
    """Profil de l'utilisateur connecté / Current user profile."""
    return user
