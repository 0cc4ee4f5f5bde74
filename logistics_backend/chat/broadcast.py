# chat/broadcast.py

"""
Server-side push into a company's socket room (sync callers).

Best-effort: a channel-layer failure is logged, never raised, so it cannot
affect the request that triggered it.
"""

from __future__ import annotations

import logging

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer

from chat.groups import company_group, is_valid_group_id

logger = logging.getLogger(__name__)


def broadcast_to_company(company_id, payload: dict) -> bool:
    company_id = str(company_id)
    if not is_valid_group_id(company_id):
        return False

    layer = get_channel_layer()
    if layer is None:
        return False

    try:
        async_to_sync(layer.group_send)(
            company_group(company_id),
            {"type": "company.event", "payload": payload},
        )
    except Exception:
        logger.exception("Company broadcast failed", extra={"company_id": company_id})
        return False
    return True
