# chat/consumers.py

"""
CHAT SOCKET GATEWAY

One websocket per client at /ws/. The connection is multiplexed with
JSON frames of the form {"type": <event>, ...}.

Handshake:
- companyId (or company_id) must be present in the query string,
  otherwise the socket is closed with code 4401.
- The socket joins company.<companyId> for company-wide pushes.

Client events:
- conversation:join   {conversationId}
- conversation:leave  {conversationId}
- typing              {conversationId, isTyping}   -> relayed to the room
- message:read        {conversationId, messageId}  -> relayed to the room

Relays never echo back to the sender. Malformed frames are ignored.
Message persistence is handled by the HTTP layer; this gateway only
carries ephemeral signals.
"""

from __future__ import annotations

import logging
from urllib.parse import parse_qs

from channels.generic.websocket import AsyncJsonWebsocketConsumer

from chat.groups import company_group, conversation_group, is_valid_group_id

logger = logging.getLogger(__name__)

CLOSE_UNAUTHORIZED = 4401


def company_id_from_scope(scope) -> str | None:
    raw = scope.get("query_string") or b""
    params = parse_qs(raw.decode("utf-8", errors="ignore"))

    for key in ("companyId", "company_id"):
        values = params.get(key) or []
        if values and is_valid_group_id(values[0]):
            return values[0]
    return None


class ChatConsumer(AsyncJsonWebsocketConsumer):
    async def connect(self):
        self.company_id = company_id_from_scope(self.scope)
        self.conversations = set()

        if not self.company_id:
            logger.info("Rejected socket without company id")
            await self.close(code=CLOSE_UNAUTHORIZED)
            return

        await self.channel_layer.group_add(company_group(self.company_id), self.channel_name)
        await self.accept()
        logger.info("Socket connected", extra={"company_id": self.company_id})

    async def disconnect(self, code):
        if not getattr(self, "company_id", None):
            return

        for conversation_id in list(self.conversations):
            await self.channel_layer.group_discard(conversation_group(conversation_id), self.channel_name)
        self.conversations.clear()

        await self.channel_layer.group_discard(company_group(self.company_id), self.channel_name)
        logger.info("Socket disconnected", extra={"company_id": self.company_id, "code": code})

    async def receive(self, text_data=None, bytes_data=None, **kwargs):
        try:
            await super().receive(text_data=text_data, bytes_data=bytes_data, **kwargs)
        except ValueError:
            logger.debug("Ignoring malformed socket frame", extra={"company_id": self.company_id})

    async def receive_json(self, content, **kwargs):
        if not isinstance(content, dict):
            return

        handler = {
            "conversation:join": self._join,
            "conversation:leave": self._leave,
            "typing": self._typing,
            "message:read": self._message_read,
        }.get(content.get("type"))

        if handler is None:
            return

        conversation_id = content.get("conversationId")
        if not is_valid_group_id(conversation_id):
            return

        await handler(conversation_id, content)

    # ---------------- client events ----------------

    async def _join(self, conversation_id, content):
        await self.channel_layer.group_add(conversation_group(conversation_id), self.channel_name)
        self.conversations.add(conversation_id)

    async def _leave(self, conversation_id, content):
        await self.channel_layer.group_discard(conversation_group(conversation_id), self.channel_name)
        self.conversations.discard(conversation_id)

    async def _typing(self, conversation_id, content):
        await self._relay(
            conversation_id,
            {
                "type": "typing",
                "conversationId": conversation_id,
                "companyId": self.company_id,
                "isTyping": bool(content.get("isTyping")),
            },
        )

    async def _message_read(self, conversation_id, content):
        message_id = content.get("messageId")
        if not message_id:
            return

        await self._relay(
            conversation_id,
            {
                "type": "message:read",
                "conversationId": conversation_id,
                "messageId": str(message_id),
                "companyId": self.company_id,
            },
        )

    async def _relay(self, conversation_id, payload):
        await self.channel_layer.group_send(
            conversation_group(conversation_id),
            {"type": "conversation.relay", "payload": payload, "sender": self.channel_name},
        )

    # ---------------- channel-layer handlers ----------------

    async def conversation_relay(self, event):
        if event.get("sender") == self.channel_name:
            return
        await self.send_json(event["payload"])

    async def company_event(self, event):
        await self.send_json(event["payload"])
