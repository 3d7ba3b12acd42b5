# SPDX-License-Identifier: MIT

import asyncio
import unittest

from momentum.service.timer import CountdownTimer


class TestCountdownTimer(unittest.IsolatedAsyncioTestCase):
    def test_starts_paused_with_default(self):
        timer = CountdownTimer(600)
        self.assertEqual(timer.remaining_seconds, 600)
        self.assertFalse(timer.running)
        self.assertEqual(timer.label, "10:00")

    async def test_counts_down_to_zero_and_stops(self):
        timer = CountdownTimer(600)
        timer.start(300)
        self.assertTrue(timer.running)
        for _ in range(300):
            timer.tick()
        self.assertEqual(timer.remaining_seconds, 0)
        self.assertFalse(timer.running)

        timer.tick()
        self.assertEqual(timer.remaining_seconds, 0)

    async def test_pause_freezes_remaining(self):
        timer = CountdownTimer(600)
        timer.start(10)
        timer.tick()
        timer.pause()
        for _ in range(5):
            timer.tick()
        self.assertEqual(timer.remaining_seconds, 9)
        self.assertFalse(timer.running)

    async def test_resume_keeps_remaining(self):
        timer = CountdownTimer(600)
        timer.start(10)
        timer.tick()
        timer.pause()
        timer.start()
        self.assertTrue(timer.running)
        self.assertEqual(timer.remaining_seconds, 9)
        timer.pause()

    async def test_reset_restores_default(self):
        timer = CountdownTimer(420)
        timer.start(100)
        timer.tick()
        timer.reset()
        self.assertEqual(timer.remaining_seconds, 420)
        self.assertFalse(timer.running)

    async def test_reset_with_seconds(self):
        timer = CountdownTimer(420)
        timer.start()
        timer.reset(60)
        self.assertEqual(timer.remaining_seconds, 60)
        self.assertFalse(timer.running)

    async def test_repeated_start_keeps_one_tick_task(self):
        timer = CountdownTimer(600)
        timer.start()
        first_task = timer._task
        timer.start()
        timer.start(120)
        self.assertIs(timer._task, first_task)
        self.assertEqual(timer.remaining_seconds, 120)
        timer.pause()
        self.assertIsNone(timer._task)

    async def test_start_at_zero_stays_paused(self):
        timer = CountdownTimer(600)
        timer.start(0)
        self.assertFalse(timer.running)
        self.assertIsNone(timer._task)

    async def test_ticks_on_the_event_loop(self):
        timer = CountdownTimer(3, interval=0.01)
        timer.start()
        await asyncio.wait_for(timer.wait(), timeout=2)
        self.assertEqual(timer.remaining_seconds, 0)
        self.assertFalse(timer.running)
        self.assertIsNone(timer._task)

    async def test_wait_returns_when_paused(self):
        timer = CountdownTimer(600, interval=0.01)
        timer.start()
        waiter = asyncio.create_task(timer.wait())
        await asyncio.sleep(0.05)
        timer.pause()
        await asyncio.wait_for(waiter, timeout=1)
        self.assertGreater(timer.remaining_seconds, 0)

    def test_pause_and_reset_without_event_loop(self):
        timer = CountdownTimer(300)
        timer.pause()
        timer.reset(30)
        self.assertEqual(timer.remaining_seconds, 30)


if __name__ == "__main__":
    unittest.main()
