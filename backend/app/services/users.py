"""User service - the collection referenced by Subject.alumni."""

import uuid
from datetime import datetime, timezone

from app.database import db
from app.config import logger
from app.utils.serialization import serialize_doc


async def create_user(user_data: dict) -> dict:
    user_id = f"user_{uuid.uuid4().hex[:12]}"
    new_user = {
        "user_id": user_id,
        "name": user_data.get("name"),
        "age": user_data.get("age"),
        "email": user_data.get("email"),
        "created_at": datetime.now(timezone.utc).isoformat()
    }
    await db.users.insert_one(new_user)
    logger.info(f"Created user {user_id}")
    return serialize_doc(new_user)


async def get_all_users():
    return await db.users.find({}, {"_id": 0}).sort("created_at", 1).to_list(None)


async def get_user_by_id(user_id: str):
    return await db.users.find_one({"user_id": user_id}, {"_id": 0})


async def delete_user(user_id: str):
    """Remove a user. Subjects still listing the id are left as they are."""
    result = await db.users.delete_one({"user_id": user_id})
    logger.info(f"Deleted user {user_id}: deleted={result.deleted_count}")
    return result
