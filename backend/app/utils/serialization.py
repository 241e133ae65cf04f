"""MongoDB document serialization utilities."""

from bson import ObjectId


def serialize_doc(doc):
    """Convert MongoDB document to JSON-safe dict"""
    if doc is None:
        return None
    if isinstance(doc, ObjectId):
        return str(doc)
    if isinstance(doc, list):
        return [serialize_doc(d) for d in doc]
    if isinstance(doc, dict):
        # insert_one() adds _id to the dict it was given
        return {
            key: serialize_doc(value)
            for key, value in doc.items()
            if key != "_id"
        }
    return doc
