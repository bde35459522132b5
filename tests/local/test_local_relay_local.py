import unittest

from relaymgr.errors import InvalidIndexError, InvalidStateError, ModuleDisabledError
from relaymgr.local import RelayLocal
from relaymgr.models import RelayVector


class TestRelayLocal(unittest.TestCase):
    def test_starts_clean_and_all_off(self) -> None:
        local = RelayLocal()
        self.assertEqual(local.staging, RelayVector.all_off())
        self.assertEqual(local.committed, RelayVector.all_off())
        self.assertFalse(local.has_unapplied_changes)

    def test_loads_committed_from_bitmask(self) -> None:
        bits = "1" * 8 + "0" * 24
        local = RelayLocal.from_bitmask(bits)
        self.assertEqual(local.committed.to_bitmask(), bits)
        self.assertEqual(local.staging, local.committed)

    def test_toggle_marks_changes_and_toggle_back_clears(self) -> None:
        local = RelayLocal()
        self.assertTrue(local.toggle(3))
        self.assertTrue(local.has_unapplied_changes)
        self.assertEqual(local.diff(), [3])

        self.assertFalse(local.toggle(3))
        self.assertFalse(local.has_unapplied_changes)

    def test_edits_never_touch_committed(self) -> None:
        local = RelayLocal()
        before = local.committed
        local.set_relay(0, True)
        local.set_module(2, True)
        local.set_all(True)
        self.assertIs(local.committed, before)
        self.assertTrue(local.committed.all_equal(False))

    def test_set_module_and_set_all(self) -> None:
        local = RelayLocal()
        local.set_module(1, True)
        self.assertEqual(local.diff(), list(range(8, 16)))

        local.set_all(False)
        self.assertFalse(local.has_unapplied_changes)

    def test_invalid_index(self) -> None:
        local = RelayLocal()
        with self.assertRaises(InvalidIndexError):
            local.toggle(32)
        with self.assertRaises(InvalidIndexError):
            local.set_module(-1, True)

    def test_discard_is_idempotent(self) -> None:
        local = RelayLocal.from_bitmask("0" * 31 + "1")
        local.toggle(0)
        local.toggle(31)

        local.discard()
        once = local.staging
        local.discard()
        self.assertEqual(local.staging, once)
        self.assertEqual(local.staging, local.committed)
        self.assertFalse(local.has_unapplied_changes)

    def test_discard_rejected_while_busy(self) -> None:
        local = RelayLocal()
        local.toggle(0)
        local.set_busy(True)
        self.assertTrue(local.busy)
        with self.assertRaises(InvalidStateError):
            local.discard()
        local.set_busy(False)
        local.discard()
        self.assertFalse(local.has_unapplied_changes)

    def test_commit_moves_baseline_only(self) -> None:
        local = RelayLocal()
        local.toggle(5)
        snapshot = local.snapshot()
        local.toggle(6)

        local.commit(snapshot)
        self.assertEqual(local.committed, snapshot)
        self.assertEqual(local.diff(), [6])

    def test_build_plan_uses_current_pair(self) -> None:
        local = RelayLocal()
        local.toggle(9)
        self.assertEqual(local.build_plan().texts(), ["M2R2ON"])


class TestEnabledModules(unittest.TestCase):
    def test_disabled_module_edits_raise(self) -> None:
        local = RelayLocal(enabled_modules=[0])
        local.toggle(7)
        with self.assertRaises(ModuleDisabledError):
            local.toggle(8)
        with self.assertRaises(ModuleDisabledError):
            local.set_module(3, True)
        with self.assertRaises(ModuleDisabledError):
            local.set_relay(31, True)

    def test_set_all_only_touches_enabled_modules(self) -> None:
        local = RelayLocal(enabled_modules=[0])
        local.set_all(True)
        self.assertEqual(local.diff(), list(range(8)))
        self.assertEqual(local.build_plan().texts(), ["M1ALLON"])

    def test_invalid_enabled_module(self) -> None:
        with self.assertRaises(InvalidIndexError):
            RelayLocal(enabled_modules=[4])


if __name__ == "__main__":
    unittest.main()
