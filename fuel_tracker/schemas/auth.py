"""
Schémas d'authentification / Authentication schemas.
Inscription, connexion, profil.
"""

from pydantic import BaseModel, Field


class AuthRequest(BaseModel):
    """Requête d'inscription ou de connexion / Registration or login request."""
    username: str = Field(min_length=3, max_length=50)
    password: str = Field(min_length=6, max_length=100)


class AuthResponse(BaseModel):
    """Réponse avec token / Token response."""
    token: str
    username: str
    message: str = "Authentication successful"


class UserMe(BaseModel):
    id: int
    username: str
    role: str

    model_config = {"from_attributes": True}
