"""
Subject service - one MongoDB operation per call.
Store errors are not caught here; they propagate to the route layer unchanged.
"""

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from app.database import db
from app.config import logger
from app.utils.serialization import serialize_doc


async def populate_alumni(subjects: List[dict]) -> List[dict]:
    """
    Replace each subject's alumni user_ids with the full user documents.

    One users query covers every subject passed in. Stored order is kept;
    ids that no longer resolve to a user are dropped.
    """
    user_ids = list(dict.fromkeys(
        user_id
        for subject in subjects
        for user_id in subject.get("alumni") or []
    ))

    users_by_id = {}
    if user_ids:
        users = await db.users.find(
            {"user_id": {"$in": user_ids}},
            {"_id": 0}
        ).to_list(None)
        users_by_id = {u["user_id"]: u for u in users}

    for subject in subjects:
        subject["alumni"] = [
            users_by_id[user_id]
            for user_id in subject.get("alumni") or []
            if user_id in users_by_id
        ]
    return subjects


async def create_subject(subject_data: dict) -> dict:
    """Insert a new subject and return the persisted document."""
    subject_id = f"subj_{uuid.uuid4().hex[:8]}"
    new_subject = {
        "subject_id": subject_id,
        "name": subject_data.get("name"),
        "teacher": subject_data.get("teacher"),
        "alumni": list(subject_data.get("alumni") or []),
        "created_at": datetime.now(timezone.utc).isoformat()
    }
    await db.subjects.insert_one(new_subject)
    logger.info(f"Created subject {subject_id} ({new_subject['name']})")
    return serialize_doc(new_subject)


async def get_all_subjects() -> List[dict]:
    subjects = await db.subjects.find({}, {"_id": 0}).sort("created_at", 1).to_list(None)
    return await populate_alumni(subjects)


async def get_subject_by_id(subject_id: str) -> Optional[dict]:
    subject = await db.subjects.find_one({"subject_id": subject_id}, {"_id": 0})
    if subject is None:
        return None
    populated = await populate_alumni([subject])
    return populated[0]


async def subject_exists(subject_id: str) -> bool:
    count = await db.subjects.count_documents({"subject_id": subject_id}, limit=1)
    return count > 0


async def update_subject(subject_id: str, update_data: dict):
    """$set the given fields. Returns the driver's UpdateResult."""
    result = await db.subjects.update_one(
        {"subject_id": subject_id},
        {"$set": update_data}
    )
    logger.info(
        f"Updated subject {subject_id}: fields={sorted(update_data)} "
        f"matched={result.matched_count} modified={result.modified_count}"
    )
    return result


async def delete_subject(subject_id: str):
    """Returns the driver's DeleteResult."""
    result = await db.subjects.delete_one({"subject_id": subject_id})
    logger.info(f"Deleted subject {subject_id}: deleted={result.deleted_count}")
    return result


async def get_users_by_subject_id(subject_id: str) -> List[dict]:
    """Expanded alumni of a subject; empty when the subject does not exist."""
    subject = await get_subject_by_id(subject_id)
    if not subject:
        return []
    return subject["alumni"]
