"""
Database connection - MongoDB async (Motor).
"""

import os
from motor.motor_asyncio import AsyncIOMotorClient

mongo_url = os.environ['MONGO_URL']
db_name = os.environ['DB_NAME']

# Async client (used by all app queries)
client = AsyncIOMotorClient(mongo_url)
db = client[db_name]
