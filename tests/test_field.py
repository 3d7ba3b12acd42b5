# SPDX-License-Identifier: MIT

import asyncio
import unittest

from fakes import FakeStore

from momentum.sync.field import SyncedField
from momentum.sync.registry import DuplicateFieldError, FieldRegistry


class TestSyncedFieldLoad(unittest.IsolatedAsyncioTestCase):
    async def test_seeded_from_store(self):
        store = FakeStore({"reset.water": 750})
        field = SyncedField.create("reset.water", 0, store)
        self.assertEqual(field.value, 0)
        self.assertFalse(field.loaded)

        await field.wait_loaded()
        self.assertTrue(field.loaded)
        self.assertEqual(field.value, 750)
        self.assertEqual(store.reads, 1)
        self.assertEqual(store.puts, [])

    async def test_missing_key_keeps_initial_value(self):
        store = FakeStore({"other": 1})
        field = SyncedField.create("reset.water", 0, store)
        await field.wait_loaded()
        self.assertTrue(field.loaded)
        self.assertEqual(field.value, 0)

    async def test_read_failure_still_marks_loaded(self):
        store = FakeStore({"reset.water": 750}, fail_reads=True)
        field = SyncedField.create("reset.water", 0, store)
        await field.wait_loaded()
        self.assertTrue(field.loaded)
        self.assertEqual(field.value, 0)

        field.set(250)
        await field.drain()
        self.assertEqual(store.puts, [("reset.water", 250)])


class TestSyncedFieldWrites(unittest.IsolatedAsyncioTestCase):
    async def test_write_before_load_is_never_persisted(self):
        gate = asyncio.Event()
        store = FakeStore(gate=gate)
        field = SyncedField.create("reset.water", 0, store)

        field.set(500)
        self.assertEqual(field.value, 500)

        gate.set()
        await field.wait_loaded()
        await field.drain()
        self.assertEqual(store.puts, [])
        self.assertEqual(field.value, 500)

    async def test_stored_value_wins_over_write_before_load(self):
        gate = asyncio.Event()
        store = FakeStore({"reset.water": 1000}, gate=gate)
        field = SyncedField.create("reset.water", 0, store)

        field.set(500)
        gate.set()
        await field.wait_loaded()
        self.assertEqual(field.value, 1000)

    async def test_write_after_load_is_persisted(self):
        store = FakeStore()
        field = SyncedField.create("reset.water", 0, store)
        await field.wait_loaded()

        field.value = 250
        self.assertEqual(field.value, 250)
        self.assertEqual(field.pending, 1)

        await field.drain()
        self.assertEqual(store.puts, [("reset.water", 250)])
        self.assertEqual(field.pending, 0)

    async def test_each_change_issues_one_write_in_order(self):
        store = FakeStore()
        field = SyncedField.create("reset.water", 0, store)
        await field.wait_loaded()

        for value in (250, 500, 750):
            field.set(value)
        await field.drain()
        self.assertEqual(store.puts_for("reset.water"), [250, 500, 750])
        self.assertEqual(store.snapshot["reset.water"], 750)

    async def test_unchanged_value_is_not_written(self):
        store = FakeStore({"reset.water": 250})
        field = SyncedField.create("reset.water", 0, store)
        await field.wait_loaded()

        field.set(250)
        await field.drain()
        self.assertEqual(store.puts, [])

    async def test_write_failure_is_swallowed(self):
        store = FakeStore(fail_writes=True)
        field = SyncedField.create("reset.water", 0, store)
        await field.wait_loaded()

        field.set(250)
        await field.drain()
        self.assertEqual(field.value, 250)

        field.set(500)
        await field.drain()
        self.assertEqual(field.value, 500)

    async def test_update_applies_function_to_current_value(self):
        store = FakeStore({"reset.weights": [71.5]})
        field = SyncedField.create("reset.weights", [], store)
        await field.wait_loaded()

        field.update(lambda weights: [*weights, 70.9])
        self.assertEqual(field.value, [71.5, 70.9])
        await field.drain()
        self.assertEqual(store.puts, [("reset.weights", [71.5, 70.9])])

    async def test_written_value_is_a_snapshot(self):
        store = FakeStore()
        field = SyncedField.create("reset.weights", [], store)
        await field.wait_loaded()

        weights = [71.5]
        field.set(weights)
        weights.append(70.0)
        await field.drain()
        self.assertEqual(store.puts, [("reset.weights", [71.5])])


class TestFieldRegistry(unittest.IsolatedAsyncioTestCase):
    async def test_one_field_per_key(self):
        registry = FieldRegistry(FakeStore())
        registry.field("reset.water", 0)
        with self.assertRaises(DuplicateFieldError):
            registry.field("reset.water", 0)
        await registry.close()

    async def test_fields_are_looked_up_by_key(self):
        registry = FieldRegistry(FakeStore())
        water = registry.field("reset.water", 0)
        self.assertIs(registry.get("reset.water"), water)
        self.assertIn("reset.water", registry)
        self.assertEqual(registry.keys(), ["reset.water"])
        await registry.close()

    async def test_typed_field_is_a_synced_field(self):
        registry = FieldRegistry(FakeStore())
        water: SyncedField[int] = registry.field("reset.water", 0)
        self.assertIsInstance(water, SyncedField)
        self.assertEqual(SyncedField[int].__origin__, SyncedField)
        await registry.close()

    async def test_wait_loaded_and_close_flushes_writes(self):
        store = FakeStore({"reset.water": 100})
        registry = FieldRegistry(store)
        water = registry.field("reset.water", 0)
        steps = registry.field("reset.steps", [])

        await registry.wait_loaded()
        self.assertTrue(water.loaded and steps.loaded)
        self.assertEqual(store.reads, 2)

        water.set(350)
        steps.set([{"date": "2025-08-14", "steps": 6500}])
        await registry.close()

        self.assertEqual(
            store.puts,
            [
                ("reset.water", 350),
                ("reset.steps", [{"date": "2025-08-14", "steps": 6500}]),
            ],
        )
        self.assertTrue(store.closed)


if __name__ == "__main__":
    unittest.main()
