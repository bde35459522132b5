import unittest

from relaymgr.transport import TransportConfig


def _config(**overrides) -> TransportConfig:
    data = {
        "imei": "300234010000000",
        "recipient_email": "ops@example.com",
        "api_url": "https://backend.example.com/api/Buoy/send-command",
    }
    data.update(overrides)
    return TransportConfig(**data)


class TestTransportConfig(unittest.TestCase):
    def test_valid_defaults(self) -> None:
        cfg = _config()
        self.assertEqual(cfg.display_name, "Web GUI")
        self.assertEqual(cfg.timeout_sec, 30.0)

    def test_payload_uses_backend_field_names(self) -> None:
        payload = _config().payload("M1R1ON")
        self.assertEqual(
            payload,
            {
                "Imei": "300234010000000",
                "Command": "M1R1ON",
                "RecipientEmail": "ops@example.com",
                "RecipientDisplayName": "Web GUI",
            },
        )

    def test_empty_fields_rejected(self) -> None:
        with self.assertRaises(ValueError):
            _config(imei="  ")
        with self.assertRaises(ValueError):
            _config(recipient_email="")

    def test_relative_url_rejected(self) -> None:
        with self.assertRaises(ValueError):
            _config(api_url="/api/Buoy/send-command")

    def test_timeout_validation(self) -> None:
        with self.assertRaises(ValueError):
            _config(timeout_sec=0)
        with self.assertRaises(TypeError):
            _config(timeout_sec="10")

    def test_from_dict_backend_keys(self) -> None:
        cfg = TransportConfig.from_dict(
            {
                "Imei": "1",
                "RecipientEmail": "a@b.c",
                "apiUrl": "http://localhost:8080/send",
                "RecipientDisplayName": "Console",
            }
        )
        self.assertEqual(cfg.imei, "1")
        self.assertEqual(cfg.display_name, "Console")

    def test_from_dict_snake_case_and_missing(self) -> None:
        cfg = TransportConfig.from_dict(
            {"imei": "1", "recipient_email": "a@b.c", "api_url": "http://h/x", "timeout_sec": 5}
        )
        self.assertEqual(cfg.timeout_sec, 5)

        with self.assertRaises(ValueError):
            TransportConfig.from_dict({"imei": "1"})


if __name__ == "__main__":
    unittest.main()
