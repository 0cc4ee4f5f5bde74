from asgiref.sync import sync_to_async
from channels.testing import WebsocketCommunicator
from django.test import SimpleTestCase

from chat.broadcast import broadcast_to_company
from chat.consumers import ChatConsumer


def _communicator(query=""):
    path = f"/ws/?{query}" if query else "/ws/"
    return WebsocketCommunicator(ChatConsumer.as_asgi(), path)


class ChatConsumerTests(SimpleTestCase):
    """
    GUARANTEES:
    - Handshake without a company id is refused (4401)
    - Room signals reach the other members, never the sender
    - Malformed frames are ignored without dropping the socket
    """

    databases = {"default"}

    async def _join(self, communicator, conversation_id):
        await communicator.send_json_to({"type": "conversation:join", "conversationId": conversation_id})
        self.assertTrue(await communicator.receive_nothing())

    async def test_rejects_missing_company_id(self):
        communicator = _communicator()
        connected, code = await communicator.connect()
        self.assertFalse(connected)
        self.assertEqual(code, 4401)

    async def test_accepts_snake_case_company_id(self):
        communicator = _communicator("company_id=co-2")
        connected, _ = await communicator.connect()
        self.assertTrue(connected)
        await communicator.disconnect()

    async def test_typing_is_relayed_to_others_only(self):
        alice = _communicator("companyId=co-1")
        bob = _communicator("companyId=co-2")
        self.assertTrue((await alice.connect())[0])
        self.assertTrue((await bob.connect())[0])

        await self._join(alice, "conv-typing")
        await self._join(bob, "conv-typing")

        await alice.send_json_to({"type": "typing", "conversationId": "conv-typing", "isTyping": True})

        message = await bob.receive_json_from()
        self.assertEqual(
            message,
            {"type": "typing", "conversationId": "conv-typing", "companyId": "co-1", "isTyping": True},
        )
        self.assertTrue(await alice.receive_nothing())

        await alice.disconnect()
        await bob.disconnect()

    async def test_message_read_requires_message_id(self):
        alice = _communicator("companyId=co-1")
        bob = _communicator("companyId=co-2")
        await alice.connect()
        await bob.connect()
        await self._join(alice, "conv-read")
        await self._join(bob, "conv-read")

        await alice.send_json_to({"type": "message:read", "conversationId": "conv-read"})
        self.assertTrue(await bob.receive_nothing())

        await alice.send_json_to({"type": "message:read", "conversationId": "conv-read", "messageId": "m-1"})
        message = await bob.receive_json_from()
        self.assertEqual(message["type"], "message:read")
        self.assertEqual(message["messageId"], "m-1")
        self.assertEqual(message["companyId"], "co-1")

        await alice.disconnect()
        await bob.disconnect()

    async def test_leave_stops_relays(self):
        alice = _communicator("companyId=co-1")
        bob = _communicator("companyId=co-2")
        await alice.connect()
        await bob.connect()
        await self._join(alice, "conv-leave")
        await self._join(bob, "conv-leave")

        await bob.send_json_to({"type": "conversation:leave", "conversationId": "conv-leave"})
        self.assertTrue(await bob.receive_nothing())

        await alice.send_json_to({"type": "typing", "conversationId": "conv-leave", "isTyping": True})
        self.assertTrue(await bob.receive_nothing())

        await alice.disconnect()
        await bob.disconnect()

    async def test_malformed_frames_are_ignored(self):
        communicator = _communicator("companyId=co-1")
        await communicator.connect()

        await communicator.send_to(text_data="not json")
        await communicator.send_json_to(["not", "a", "dict"])
        await communicator.send_json_to({"type": "typing", "conversationId": "bad id with spaces"})
        self.assertTrue(await communicator.receive_nothing())

        await communicator.send_json_to({"type": "conversation:join", "conversationId": "conv-ok"})
        self.assertTrue(await communicator.receive_nothing())

        await communicator.disconnect()

    async def test_company_broadcast(self):
        communicator = _communicator("companyId=co-push")
        await communicator.connect()

        delivered = await sync_to_async(broadcast_to_company)("co-push", {"type": "order:completed", "orderNo": "PO1"})
        self.assertTrue(delivered)

        message = await communicator.receive_json_from()
        self.assertEqual(message, {"type": "order:completed", "orderNo": "PO1"})

        await communicator.disconnect()
