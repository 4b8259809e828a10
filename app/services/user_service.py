"""
app/services/user_service.py

Purpose: User operations

- Forwards each user operation to the repository unchanged
- Keeps HTTP concerns out of data access
- Place for future business rules on users
"""

from typing import List

from app.core.logging import get_logger
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.user import UserCreate, UserUpdate

logger = get_logger(__name__)


class UserService:

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def create(self, data: UserCreate) -> User:
        return await self.repository.create(data)

    async def find_all(self) -> List[User]:
        logger.info("Listing users")
        return await self.repository.find_all()

    async def find_one(self, user_id: str) -> User:
        return await self.repository.find_one(user_id)

    async def update(self, user_id: str, data: UserUpdate) -> User:
        return await self.repository.update(user_id, data)

    async def delete(self, user_id: str) -> User:
        return await self.repository.delete(user_id)
