# conversation_log.py
import logging
from datetime import datetime
from typing import Optional
from urllib.parse import quote

import httpx

from models import ConversationLogRecord
from settings import Settings

logger = logging.getLogger(__name__)


def format_timestamp(now: datetime) -> str:
    """en-US locale style, e.g. "1/2/2025, 3:04:05 PM"."""
    hour = now.hour % 12 or 12
    return f"{now.month}/{now.day}/{now.year}, {hour}:{now:%M:%S} {now:%p}"


def record_fields(record: ConversationLogRecord, now: Optional[datetime] = None) -> dict:
    """Column layout of the conversations table."""
    now = now or datetime.now()
    return {
        "Timestamp": format_timestamp(now),
        "User Message": record.user_message,
        "AI Response": record.ai_response,
        "Message Length": record.message_length,
        "Response Time": record.response_time_ms,
        "Tokens Used": record.tokens_used or 0,
    }


def log_conversation(
    record: ConversationLogRecord,
    settings: Settings,
    http: Optional[httpx.Client] = None,
) -> Optional[str]:
    """Write one exchange to Airtable and return the new record id.

    Single attempt. Missing credentials skip the write; any failure is logged
    and dropped so the chat response is never affected.
    """
    if not settings.logging_enabled:
        logger.info("Airtable credentials missing, skipping conversation log")
        return None

    url = "{}/{}/{}".format(
        settings.AIRTABLE_API_URL.rstrip("/"),
        settings.AIRTABLE_BASE_ID,
        quote(settings.AIRTABLE_TABLE_NAME, safe=""),
    )
    headers = {"Authorization": f"Bearer {settings.AIRTABLE_API_KEY}"}
    payload = {"fields": record_fields(record)}

    try:
        if http is not None:
            resp = http.post(url, json=payload, headers=headers)
        else:
            with httpx.Client(timeout=settings.AIRTABLE_TIMEOUT) as client:
                resp = client.post(url, json=payload, headers=headers)
        resp.raise_for_status()
        record_id = resp.json().get("id")
    except Exception as e:
        logger.warning("Failed to log conversation to Airtable: %s", e)
        return None

    logger.info("Logged conversation to Airtable: %s", record_id)
    return record_id
