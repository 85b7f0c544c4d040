"""Open / close sequencing of the modal stack."""
import asyncio
import unittest
from modal_service.core.errors import DuplicateViewError
from modal_service.core.modal_event import ModalEventType
from modal_service.core.orchestrator import TransitionOrchestrator
from modal_service.core.presentable import Presentable
from tests.test_utils import EventCollector, RecordingPresenter, settle


class TransitionTestCase(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.presenter = RecordingPresenter()
        self.modals = TransitionOrchestrator(self.presenter)
        self.collector = EventCollector()
        self.modals.event_listener.subscribe(self.collector.on_event)
        self.v1 = Presentable(name="v1")
        self.v2 = Presentable(name="v2")


class OpenTests(TransitionTestCase):
    async def test_first_open_renders_then_animates_in(self):
        await self.modals.open(self.v1)
        self.assertEqual(self.presenter.calls, [("render", self.v1), ("animate_in", self.v1)])
        self.assertEqual(self.modals.stack.snapshot(), [self.v1])
        self.assertTrue(self.modals.is_open())

    async def test_second_open_swaps_with_previous(self):
        await self.modals.open(self.v1)
        await self.modals.open(self.v2)
        self.assertEqual(self.modals.stack.snapshot(), [self.v1, self.v2])
        self.assertIn(("animate_swap", self.v1, self.v2), self.presenter.calls)
        self.assertEqual(self.presenter.count("animate_in", self.v2), 0)

    async def test_events_wrap_the_transition(self):
        seen = []
        def on_before(e):
            seen.append((self.modals.is_open(), self.modals.stack.snapshot()))
        self.modals.event_listener.subscribe(on_before, types={ModalEventType.BEFORE_OPEN})
        options = {"title": "hello"}
        await self.modals.open(self.v1, options)
        self.assertEqual(self.collector.types(), [ModalEventType.BEFORE_OPEN, ModalEventType.OPEN])
        # BEFORE_OPEN fires before the flag flips and before the push
        self.assertEqual(seen, [(False, [])])
        for ev in self.collector.events:
            self.assertIs(ev.view, self.v1)
            self.assertIs(ev.get("options"), options)
            self.assertIs(ev.source, self.modals)

    async def test_render_failure_propagates_and_keeps_view_stacked(self):
        self.presenter.failures[("render", self.v1)] = RuntimeError("render failed")
        with self.assertRaises(RuntimeError):
            await self.modals.open(self.v1)
        self.assertEqual(self.modals.stack.snapshot(), [self.v1])
        self.assertEqual(self.presenter.animations(), [])
        self.assertNotIn(ModalEventType.OPEN, self.collector.types())

    async def test_animation_failure_propagates(self):
        await self.modals.open(self.v1)
        self.presenter.failures[("animate_swap", self.v1)] = RuntimeError("swap failed")
        with self.assertRaises(RuntimeError):
            await self.modals.open(self.v2)
        self.assertEqual(self.modals.stack.snapshot(), [self.v1, self.v2])
        self.assertEqual(self.collector.views(ModalEventType.OPEN), [self.v1])

    async def test_reopening_a_stacked_view_fails(self):
        await self.modals.open(self.v1)
        self.presenter.calls.clear()
        with self.assertRaises(DuplicateViewError):
            await self.modals.open(self.v1)
        self.assertEqual(self.presenter.calls, [])
        self.assertEqual(self.modals.stack.snapshot(), [self.v1])
        self.assertEqual(self.collector.views(ModalEventType.BEFORE_OPEN), [self.v1, self.v1])

    async def test_plain_function_hooks_are_supported(self):
        calls = []
        class SyncPresenter:
            def render(self, view, options=None):
                calls.append("render")
            def animate_in(self, view, options=None):
                calls.append("animate_in")
        modals = TransitionOrchestrator(SyncPresenter())
        await modals.open(self.v1)
        self.assertEqual(calls, ["render", "animate_in"])


class CloseOneTests(TransitionTestCase):
    async def asyncSetUp(self):
        await self.modals.open(self.v1)
        await self.modals.open(self.v2)
        self.presenter.calls.clear()
        self.collector.clear()

    async def test_close_top_swaps_back_to_previous(self):
        await self.modals.close(self.v2)
        self.assertEqual(self.presenter.calls, [("animate_swap", self.v2, self.v1), ("remove", self.v2)])
        self.assertEqual(self.modals.stack.snapshot(), [self.v1])
        # Flag tracks the last transition, not whether anything is still stacked
        self.assertFalse(self.modals.is_open())
        self.assertTrue(self.modals.stack.active())

    async def test_close_last_view_animates_out(self):
        await self.modals.close(self.v2)
        self.presenter.calls.clear()
        await self.modals.close(self.v1)
        self.assertEqual(self.presenter.calls, [("animate_out", self.v1), ("remove", self.v1)])
        self.assertFalse(self.modals.stack.active())

    async def test_close_lower_view_swaps_with_remaining_top(self):
        await self.modals.close(self.v1)
        self.assertEqual(self.presenter.calls, [("animate_swap", self.v1, self.v2), ("remove", self.v1)])
        self.assertEqual(self.modals.stack.snapshot(), [self.v2])

    async def test_close_events(self):
        await self.modals.close(self.v2, {"reason": "done"})
        self.assertEqual(self.collector.types(), [ModalEventType.BEFORE_CLOSE, ModalEventType.CLOSE])
        self.assertEqual(self.collector.views(ModalEventType.CLOSE), [self.v2])
        self.assertEqual(self.collector.events[-1].get("options"), {"reason": "done"})

    async def test_animation_failure_skips_remove_but_keeps_view_unstacked(self):
        self.presenter.failures[("animate_swap", self.v2)] = RuntimeError("swap failed")
        with self.assertRaises(RuntimeError):
            await self.modals.close(self.v2)
        self.assertEqual(self.presenter.count("remove", self.v2), 0)
        self.assertEqual(self.modals.stack.snapshot(), [self.v1])
        self.assertNotIn(ModalEventType.CLOSE, self.collector.types())

    async def test_open_after_close_sets_flag_again(self):
        await self.modals.close(self.v2)
        await self.modals.open(self.v2)
        self.assertTrue(self.modals.is_open())
        self.assertEqual(self.modals.stack.snapshot(), [self.v1, self.v2])


class CloseAllTests(TransitionTestCase):
    async def asyncSetUp(self):
        await self.modals.open(self.v1)
        await self.modals.open(self.v2)
        self.presenter.calls.clear()
        self.presenter.timeline.clear()
        self.collector.clear()

    async def test_only_top_view_animates_out(self):
        await self.modals.close()
        self.assertEqual(self.presenter.animations(), [("animate_out", self.v2)])
        self.assertEqual(self.presenter.count("remove", self.v1), 1)
        self.assertEqual(self.presenter.count("remove", self.v2), 1)
        self.assertFalse(self.modals.stack.active())
        self.assertFalse(self.modals.is_open())

    async def test_events_follow_stack_order(self):
        await self.modals.close()
        self.assertEqual(self.collector.types(), [
            ModalEventType.BEFORE_CLOSE, ModalEventType.BEFORE_CLOSE,
            ModalEventType.CLOSE, ModalEventType.CLOSE,
        ])
        self.assertEqual(self.collector.views(ModalEventType.BEFORE_CLOSE), [self.v1, self.v2])
        self.assertEqual(self.collector.views(ModalEventType.CLOSE), [self.v1, self.v2])

    async def test_removals_run_concurrently(self):
        gate = asyncio.Event()
        self.presenter.gates[("remove", self.v1)] = gate
        closing = asyncio.ensure_future(self.modals.close())
        await settle()
        self.assertFalse(closing.done())
        # v2 was removed while v1's removal is still pending
        self.assertEqual(self.presenter.count("remove", self.v2), 1)
        self.assertIn("remove:end", self.presenter.timeline)
        gate.set()
        await closing
        self.assertEqual(self.collector.views(ModalEventType.CLOSE), [self.v1, self.v2])

    async def test_failed_removal_surfaces_after_all_attempts(self):
        self.presenter.failures[("remove", self.v1)] = RuntimeError("remove failed")
        with self.assertRaises(RuntimeError):
            await self.modals.close()
        self.assertEqual(self.presenter.count("remove", self.v2), 1)
        self.assertNotIn(ModalEventType.CLOSE, self.collector.types())
        self.assertFalse(self.modals.stack.active())

    async def test_empty_stack_does_nothing(self):
        modals = TransitionOrchestrator(self.presenter)
        await modals.open(self.v1)
        # Stack emptied behind the orchestrator's back; the flag still says open
        modals.stack.drain()
        self.assertTrue(modals.is_open())
        self.presenter.calls.clear()
        collector = EventCollector()
        modals.event_listener.subscribe(collector.on_event)
        await modals.close()
        self.assertEqual(self.presenter.calls, [])
        self.assertEqual(collector.types(), [])
        self.assertFalse(modals.is_open())


if __name__ == '__main__':
    unittest.main()
