"""
app/api/users.py

Purpose: User HTTP endpoints

- Binds the five /user routes to UserService operations
- Request bodies are validated by the UserCreate/UserUpdate schemas
- Results are serialized as User JSON
- Not-found and store errors are mapped by app.core.errors
"""

from fastapi import APIRouter
from typing import List

from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate
from app.services.user_service import UserService


def create_user_router(service: UserService) -> APIRouter:
    """
    Builds the /user router around a service instance.

    Args:
        service: UserService every route delegates to

    Returns:
        APIRouter ready to be included in the app
    """
    router = APIRouter(prefix="/user", tags=["Users"])

    @router.post("", response_model=User, status_code=201)
    async def create_user(payload: UserCreate):
        """Create a user."""
        return await service.create(payload)

    @router.get("", response_model=List[User])
    async def list_users():
        """List every stored user."""
        return await service.find_all()

    @router.get("/{user_id}", response_model=User)
    async def get_user(user_id: str):
        """Fetch one user by id."""
        return await service.find_one(user_id)

    @router.patch("/{user_id}", response_model=User)
    async def update_user(user_id: str, payload: UserUpdate):
        """Apply a partial update to a user."""
        return await service.update(user_id, payload)

    @router.delete("/{user_id}", response_model=User)
    async def delete_user(user_id: str):
        """Delete a user and return the removed record."""
        return await service.delete(user_id)

    return router
