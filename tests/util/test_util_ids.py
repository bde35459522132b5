import unittest
import uuid

from relaymgr.util.ids import new_plan_id, new_uuid


class TestIds(unittest.TestCase):
    def test_new_uuid_is_valid_uuid4(self) -> None:
        value = new_uuid()
        parsed = uuid.UUID(value)
        self.assertEqual(parsed.version, 4)

    def test_plan_ids_are_unique(self) -> None:
        self.assertNotEqual(new_plan_id(), new_plan_id())


if __name__ == "__main__":
    unittest.main()
