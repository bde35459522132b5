import json
import unittest

import httpx

from relaymgr.errors import (
    ApiError,
    AuthError,
    BadRequestError,
    NetworkError,
    RateLimitError,
)
from relaymgr.transport import CommandTransport, HttpCommandTransport, TransportConfig

API_URL = "https://backend.example.com/api/Buoy/send-command"


def _config() -> TransportConfig:
    return TransportConfig(
        imei="300234010000000",
        recipient_email="ops@example.com",
        api_url=API_URL,
    )


class TestHttpCommandTransport(unittest.TestCase):
    def _transport(self, handler) -> HttpCommandTransport:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        self.addCleanup(client.close)
        return HttpCommandTransport(_config(), client=client)

    def test_satisfies_protocol(self) -> None:
        transport = self._transport(lambda request: httpx.Response(200, json={}))
        self.assertIsInstance(transport, CommandTransport)

    def test_posts_json_payload(self) -> None:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"status": "queued"})

        self._transport(handler).send("M1ALLON", description="Module 1 All ON")

        self.assertEqual(len(seen), 1)
        request = seen[0]
        self.assertEqual(request.method, "POST")
        self.assertEqual(str(request.url), API_URL)
        self.assertEqual(request.headers["content-type"], "application/json")
        self.assertEqual(
            json.loads(request.content),
            {
                "Imei": "300234010000000",
                "Command": "M1ALLON",
                "RecipientEmail": "ops@example.com",
                "RecipientDisplayName": "Web GUI",
            },
        )

    def test_error_details_become_message(self) -> None:
        transport = self._transport(
            lambda request: httpx.Response(500, json={"errorDetails": "modem offline"})
        )
        with self.assertRaises(ApiError) as ctx:
            transport.send("ALLON")
        self.assertEqual(str(ctx.exception), "modem offline")
        self.assertEqual(ctx.exception.details["status_code"], 500)
        self.assertEqual(ctx.exception.details["error_details"], "modem offline")

    def test_non_json_error_body(self) -> None:
        transport = self._transport(lambda request: httpx.Response(400, text="nope"))
        with self.assertRaises(BadRequestError) as ctx:
            transport.send("ALLON")
        self.assertEqual(str(ctx.exception), "Command failed to send")

    def test_status_mapping(self) -> None:
        with self.assertRaises(AuthError):
            self._transport(lambda request: httpx.Response(401, json={})).send("STATUS")
        with self.assertRaises(RateLimitError):
            self._transport(lambda request: httpx.Response(429, json={})).send("STATUS")

    def test_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with self.assertRaises(NetworkError) as ctx:
            self._transport(handler).send("ALLOFF")
        self.assertIsInstance(ctx.exception.cause, httpx.ConnectError)

    def test_single_attempt_per_call(self) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(503, json={})

        with self.assertRaises(ApiError):
            self._transport(handler).send("ALLON")
        self.assertEqual(len(calls), 1)

    def test_close_leaves_injected_client_open(self) -> None:
        client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        self.addCleanup(client.close)
        with HttpCommandTransport(_config(), client=client):
            pass
        self.assertFalse(client.is_closed)

    def test_owned_client_is_closed(self) -> None:
        transport = HttpCommandTransport(_config())
        transport.close()
        self.assertTrue(transport._client.is_closed)


if __name__ == "__main__":
    unittest.main()
