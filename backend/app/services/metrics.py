"""
API metrics tracking and cleanup.
"""

from datetime import datetime, timezone, timedelta
from typing import Optional

from app.database import db
from app.config import logger, API_METRICS_ENABLED, METRICS_RETENTION_DAYS


async def log_api_metric(endpoint: str, method: str, response_time_ms: int,
                         status_code: int, error_type: Optional[str],
                         ip_address: Optional[str]):
    """Log API metrics to database"""
    if not API_METRICS_ENABLED:
        return
    try:
        await db.api_metrics.insert_one({
            "endpoint": endpoint,
            "method": method,
            "response_time_ms": response_time_ms,
            "status_code": status_code,
            "error_type": error_type,
            "ip_address": ip_address,
            "timestamp": datetime.now(timezone.utc).isoformat()
        })
    except Exception as e:
        logger.error(f"Failed to log API metric: {e}")


async def cleanup_old_metrics():
    """Delete API metrics older than the retention window"""
    try:
        cutoff = (datetime.now(timezone.utc) - timedelta(days=METRICS_RETENTION_DAYS)).isoformat()
        result = await db.api_metrics.delete_many({"timestamp": {"$lt": cutoff}})
        logger.info(f"Deleted {result.deleted_count} old api_metrics records")
    except Exception as e:
        logger.error(f"Error during metrics cleanup: {e}", exc_info=True)
