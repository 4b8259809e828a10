"""
app/repositories/user_repository.py

Purpose: User data access

- Sole translator between user operations and MongoDB calls
- Converts raw documents into User models
- Reports missing documents as UserNotFoundError
"""

from bson import ObjectId
from pymongo import ReturnDocument
from typing import List

from app.core.exceptions import UserNotFoundError
from app.core.logging import get_logger
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate
from utils.validation_utils import validate_object_id

logger = get_logger(__name__)


def _object_id(user_id: str) -> ObjectId:
    """
    Parses a path identifier. A malformed id cannot name any document,
    so it is reported the same way as a missing one.
    """
    if not validate_object_id(user_id):
        raise UserNotFoundError(user_id)
    return ObjectId(user_id)


class UserRepository:
    """
    CRUD access to the users collection.

    Store errors (pymongo.errors.PyMongoError) are not caught here.
    """

    def __init__(self, collection):
        self.collection = collection

    async def create(self, data: UserCreate) -> User:
        document = data.to_document()
        result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        logger.debug(f"Inserted user {result.inserted_id}")
        return User.from_document(document)

    async def find_all(self) -> List[User]:
        documents = await self.collection.find({}).to_list(length=None)
        return [User.from_document(doc) for doc in documents]

    async def find_one(self, user_id: str) -> User:
        document = await self.collection.find_one({"_id": _object_id(user_id)})
        if document is None:
            raise UserNotFoundError(user_id)
        return User.from_document(document)

    async def update(self, user_id: str, data: UserUpdate) -> User:
        """
        Applies the fields present in ``data`` and returns the updated user.

        An update with no fields is a read of the current document.
        """
        fields = data.to_update()
        if not fields:
            return await self.find_one(user_id)

        document = await self.collection.find_one_and_update(
            {"_id": _object_id(user_id)},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
        if document is None:
            raise UserNotFoundError(user_id)
        logger.debug(f"Updated user {user_id}: {sorted(fields)}")
        return User.from_document(document)

    async def delete(self, user_id: str) -> User:
        document = await self.collection.find_one_and_delete(
            {"_id": _object_id(user_id)}
        )
        if document is None:
            raise UserNotFoundError(user_id)
        logger.debug(f"Deleted user {user_id}")
        return User.from_document(document)
