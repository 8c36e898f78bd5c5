"""Tests for the Transition state machine driven by a FrameLoop."""

import pytest

from tick_transition import (
    FrameHandle,
    FrameLoop,
    Transition,
    TransitionConfig,
    TransitionState,
    make_transition,
)
from tick_transition.easing import back_out, ease_in


def _recorder(transition):
    """Record change and ended events in order."""
    events = []
    transition.on("change", lambda progress: events.append(("change", progress)))
    transition.on("ended", lambda: events.append(("ended", None)))
    return events


def _progress(events):
    return [value for kind, value in events if kind == "change"]


class NonCancellingLoop(FrameLoop):
    """A scheduler whose handles ignore cancel(), so stale frames still fire."""

    def request_frame(self, callback):
        super().request_frame(callback)
        return FrameHandle(callback)


class TestInitialState:
    def test_idle_before_run(self):
        transition = make_transition(FrameLoop())
        assert transition.state is TransitionState.IDLE
        assert transition.running is False
        assert transition.paused is False

    def test_config_defaults(self):
        transition = Transition(FrameLoop())
        assert transition.duration == 800
        assert transition.delay == 0
        assert transition.loop is False
        assert transition.ease is ease_in

    def test_config_values_copied(self):
        config = TransitionConfig(ease="linear", duration=250, delay=30, loop=True)
        transition = Transition(FrameLoop(), config)
        assert transition.duration == 250
        assert transition.delay == 30
        assert transition.loop is True

    def test_nothing_scheduled_before_run(self):
        loop = FrameLoop()
        make_transition(loop)
        assert loop.pending == 0


class TestRun:
    """A plain run from start to finish."""

    def test_change_sequence_then_ended(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, ease="linear", duration=100)
        events = _recorder(transition)

        transition.run()
        loop.run(10)

        assert events == [
            ("change", 0.2),
            ("change", 0.4),
            ("change", 0.6),
            ("change", 0.8),
            ("change", 1.0),
            ("ended", None),
        ]

    def test_progress_is_eased(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, duration=100)
        events = _recorder(transition)

        transition.run()
        loop.run(5)

        assert _progress(events) == [ease_in(0.2), ease_in(0.4), ease_in(0.6), ease_in(0.8), 1.0]

    def test_state_through_run(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, duration=100)

        transition.run()
        assert transition.state is TransitionState.RUNNING
        assert transition.running is True

        loop.run(5)
        assert transition.state is TransitionState.IDLE
        assert transition.running is False
        assert loop.pending == 0

    def test_ended_fires_exactly_once(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, duration=100)
        ended = []
        transition.on("ended", lambda: ended.append(True))

        transition.run()
        loop.run(50)

        assert ended == [True]

    def test_completes_without_handlers(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, duration=100)
        transition.run()
        loop.run(5)
        assert transition.state is TransitionState.IDLE

    def test_overshoot_progress_with_monotonic_time(self):
        loop = FrameLoop(fps=100)
        transition = make_transition(loop, ease=back_out, duration=500)
        events = _recorder(transition)

        transition.run()
        loop.run(50)

        progress = _progress(events)
        assert max(progress) > 1.0
        assert progress[-1] == 1.0
        assert events[-1] == ("ended", None)

    def test_reusable_after_end(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, ease="linear", duration=100)
        events = _recorder(transition)

        transition.run()
        loop.run(5)
        transition.run()
        loop.run(5)

        assert events.count(("ended", None)) == 2
        assert _progress(events)[5] == 0.2

    def test_restart_from_ended_handler(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, ease="linear", duration=40)
        runs = []

        def again():
            runs.append(loop.now())
            if len(runs) < 3:
                transition.run()

        transition.on("ended", again)
        transition.run()
        loop.run(20)

        assert runs == [40.0, 80.0, 120.0]


class TestOverrides:
    def test_duration_override_persists(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, ease="linear", duration=1000)
        events = _recorder(transition)

        transition.run(duration=200)
        loop.run(10)
        assert events[-1] == ("ended", None)
        assert transition.duration == 200

        events.clear()
        transition.run()
        loop.run(10)
        assert len(_progress(events)) == 10

    def test_omitted_arguments_keep_configured_values(self):
        transition = make_transition(FrameLoop(), duration=300, delay=50)
        transition.run()
        assert transition.duration == 300
        assert transition.delay == 50

    def test_restart_resets_elapsed(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, ease="linear", duration=1000)
        events = _recorder(transition)

        transition.run()
        loop.run(10)
        assert _progress(events)[-1] == 0.2

        transition.run()
        loop.step()
        assert _progress(events)[-1] == 0.02

    def test_restart_does_not_duplicate_frames(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, ease="linear", duration=1000)
        events = _recorder(transition)

        transition.run()
        loop.run(3)
        transition.run()
        transition.run()
        loop.run(4)

        assert len(events) == 7


class TestDelay:
    def test_delay_defers_first_frame(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, ease="linear", duration=100)
        events = _recorder(transition)

        transition.run(delay=100)
        assert transition.state is TransitionState.SCHEDULED
        assert transition.running is False

        loop.run(5)
        assert events == []
        assert transition.state is TransitionState.RUNNING

        loop.step()
        assert events == [("change", 0.2)]

    def test_zero_delay_starts_synchronously(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, delay=0)
        transition.run()
        assert transition.state is TransitionState.RUNNING

    def test_negative_delay_starts_synchronously(self):
        transition = make_transition(FrameLoop(), delay=-50)
        transition.run()
        assert transition.state is TransitionState.RUNNING

    def test_run_during_delay_replaces_timer(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, ease="linear", duration=100, delay=100)
        events = _recorder(transition)

        transition.run()
        loop.run(2)
        transition.run(delay=0)
        loop.run(10)

        assert _progress(events) == [0.2, 0.4, 0.6, 0.8, 1.0]

    def test_pause_during_delay_is_noop(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, delay=100)
        transition.run()
        transition.pause()
        assert transition.state is TransitionState.SCHEDULED


class TestPause:
    """Paused time is excluded from progress."""

    def test_resume_continues_from_paused_elapsed(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, ease="linear", duration=1000)
        events = _recorder(transition)

        transition.run()
        loop.run(20)
        assert _progress(events)[-1] == pytest.approx(0.4)

        transition.pause()
        assert transition.paused is True
        assert transition.running is True
        loop.advance(5000)

        transition.play()
        loop.step()
        assert _progress(events)[-1] == pytest.approx(0.42)

    def test_no_frames_while_paused(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, duration=1000)
        events = _recorder(transition)

        transition.run()
        loop.run(5)
        transition.pause()
        count = len(events)
        loop.run(100)

        assert len(events) == count
        assert loop.pending == 0

    def test_pause_never_fires_ended(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, duration=100)
        ended = []
        transition.on("ended", lambda: ended.append(True))

        transition.run()
        loop.step()
        transition.pause()
        loop.run(20)

        assert ended == []

    def test_multiple_pauses_accumulate(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, ease="linear", duration=1000)
        events = _recorder(transition)

        transition.run()
        loop.run(5)
        transition.pause()
        loop.advance(300)
        transition.play()
        loop.run(5)
        transition.pause()
        loop.advance(700)
        transition.play()
        loop.step()

        assert _progress(events)[-1] == pytest.approx(0.22)

    def test_double_pause_counts_once(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, ease="linear", duration=1000)
        events = _recorder(transition)

        transition.run()
        loop.run(10)
        transition.pause()
        loop.advance(500)
        transition.pause()
        transition.play()
        loop.step()

        assert _progress(events)[-1] == pytest.approx(0.22)

    def test_paused_run_completes_after_resume(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, ease="linear", duration=100)
        events = _recorder(transition)

        transition.run()
        loop.run(2)
        transition.pause()
        loop.advance(1000)
        transition.play()
        loop.run(10)

        assert _progress(events) == pytest.approx([0.2, 0.4, 0.6, 0.8, 1.0])
        assert events[-1] == ("ended", None)

    def test_pause_after_ended_is_noop(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, duration=100)
        transition.run()
        loop.run(5)

        transition.pause()
        assert transition.state is TransitionState.IDLE
        assert transition.paused is False

    def test_run_clears_pause(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, ease="linear", duration=1000)
        events = _recorder(transition)

        transition.run()
        loop.run(10)
        transition.pause()
        transition.run()
        assert transition.paused is False
        loop.step()
        assert _progress(events)[-1] == 0.02

    def test_pause_from_change_handler(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, ease="linear", duration=1000)
        seen = []

        def on_change(progress):
            seen.append(progress)
            if len(seen) == 3:
                transition.pause()

        transition.on("change", on_change)
        transition.run()
        loop.run(10)

        assert len(seen) == 3
        assert transition.paused is True

    def test_stale_frame_after_pause_is_ignored(self):
        loop = NonCancellingLoop(fps=50)
        transition = make_transition(loop, ease="linear", duration=1000)
        events = _recorder(transition)

        transition.run()
        loop.step()
        transition.pause()
        loop.step()
        assert len(events) == 1

    def test_pause_and_play_in_one_frame_keeps_single_chain(self):
        loop = NonCancellingLoop(fps=50)
        transition = make_transition(loop, ease="linear", duration=1000)
        events = _recorder(transition)

        transition.run()
        loop.step()
        transition.pause()
        transition.play()
        loop.run(3)

        assert len(events) == 4


class TestPlay:
    def test_play_before_run_is_noop(self):
        loop = FrameLoop()
        transition = make_transition(loop)
        transition.play()
        assert transition.state is TransitionState.IDLE
        assert loop.pending == 0

    def test_play_after_ended_is_noop(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, duration=100)
        events = _recorder(transition)
        transition.run()
        loop.run(5)
        count = len(events)

        transition.play()
        loop.run(5)

        assert len(events) == count

    def test_play_while_running_does_not_rewind(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, ease="linear", duration=1000)
        events = _recorder(transition)

        transition.run()
        loop.run(10)
        transition.play()
        loop.step()

        assert _progress(events)[-1] == pytest.approx(0.22)


class TestLoop:
    def test_loop_never_ends(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, ease="linear", duration=500, loop=True)
        events = _recorder(transition)

        transition.run()
        loop.run(100)

        assert ("ended", None) not in events
        progress = _progress(events)
        assert len(progress) == 100
        assert progress.count(1.0) == 4
        assert transition.running is True

    def test_loop_restarts_near_zero(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, ease="linear", duration=500, loop=True)
        events = _recorder(transition)

        transition.run()
        loop.run(80)

        progress = _progress(events)
        for i, value in enumerate(progress[:-1]):
            if value == 1.0:
                assert progress[i + 1] == pytest.approx(0.04)

    def test_loop_can_pause_and_resume(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, ease="linear", duration=500, loop=True)
        events = _recorder(transition)

        transition.run()
        loop.run(30)
        transition.pause()
        loop.advance(10_000)
        transition.play()
        loop.step()

        assert _progress(events)[-1] == pytest.approx(0.24)

    def test_disabling_loop_lets_run_end(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, ease="linear", duration=100, loop=True)
        events = _recorder(transition)

        transition.run()
        loop.run(7)
        transition.loop = False
        loop.run(10)

        assert events[-1] == ("ended", None)
        assert events.count(("ended", None)) == 1


class TestEdgeCases:
    @pytest.mark.parametrize("duration", [0, -100])
    def test_non_positive_duration_completes_on_first_frame(self, duration):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, duration=duration)
        events = _recorder(transition)

        transition.run(duration=duration)
        loop.step()

        assert events == [("change", 1.0), ("ended", None)]

    def test_independent_transitions_share_a_loop(self):
        loop = FrameLoop(fps=50)
        fast = make_transition(loop, ease="linear", duration=40)
        slow = make_transition(loop, ease="linear", duration=100)
        fast_events = _recorder(fast)
        slow_events = _recorder(slow)

        fast.run()
        slow.run()
        loop.run(5)

        assert _progress(fast_events) == [0.5, 1.0]
        assert _progress(slow_events) == [0.2, 0.4, 0.6, 0.8, 1.0]

    def test_handler_exception_propagates(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop)

        def boom(progress):
            raise RuntimeError("boom")

        transition.on("change", boom)
        transition.run()
        with pytest.raises(RuntimeError, match="boom"):
            loop.step()


class TestHandlers:
    """Single handler per event; the last registration wins."""

    def test_last_registration_wins(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, duration=40)
        first, second = [], []
        transition.on("change", first.append)
        transition.on("change", second.append)

        transition.run()
        loop.run(2)

        assert first == []
        assert len(second) == 2

    def test_ended_handler_replaced(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, duration=20)
        calls = []
        transition.on("ended", lambda: calls.append("first"))
        transition.on("ended", lambda: calls.append("second"))

        transition.run()
        loop.step()

        assert calls == ["second"]

    def test_none_clears_handler(self):
        loop = FrameLoop(fps=50)
        transition = make_transition(loop, duration=40)
        seen = []
        transition.on("change", seen.append)
        transition.on("change", None)

        transition.run()
        loop.run(2)

        assert seen == []
        assert transition.state is TransitionState.IDLE

    def test_unknown_event_rejected(self):
        transition = make_transition(FrameLoop())
        with pytest.raises(ValueError, match="Unknown event"):
            transition.on("start", lambda: None)
