import unittest

from pomodoro.events import SinkPublisher
from pomodoro.session import build_session


class _ProgressOnlySink:
    def __init__(self):
        self.calls: list[tuple] = []

    def on_progress(self, *args):
        self.calls.append(args)


class _FailingSink:
    def on_phase_started(self, phase):
        raise RuntimeError("tray unavailable")

    def on_phase_complete(self, phase_label):
        raise OSError("stdout closed")


class _RecordingSink:
    def __init__(self):
        self.events: list[str] = []

    def on_session_started(self, session):
        self.events.append("session_started")

    def on_phase_started(self, phase):
        self.events.append(f"phase_started:{phase.label}")

    def on_progress(self, *args):
        self.events.append("progress")

    def on_phase_complete(self, phase_label):
        self.events.append(f"phase_complete:{phase_label}")

    def on_session_complete(self):
        self.events.append("session_complete")


class SinkPublisherTests(unittest.TestCase):
    def test_partial_sinks_only_receive_events_they_handle(self) -> None:
        sink = _ProgressOnlySink()
        publisher = SinkPublisher([sink])
        session = build_session(1, 1, 1, 1)

        publisher.session_started(session)
        publisher.phase_started(session.phases[0])
        publisher.progress("Work", 1, 59, 60)
        publisher.phase_complete("Work")
        publisher.session_complete()

        self.assertEqual([("Work", 1, 59, 60)], sink.calls)

    def test_failing_sink_is_logged_and_others_still_notified(self) -> None:
        recorder = _RecordingSink()
        publisher = SinkPublisher([_FailingSink(), recorder])
        phase = build_session(1, 1, 1, 1).phases[0]

        with self.assertLogs("pomodoro.events", level="ERROR") as logs:
            publisher.phase_started(phase)
            publisher.phase_complete("Work")

        self.assertEqual(["phase_started:Work", "phase_complete:Work"], recorder.events)
        self.assertEqual(2, len(logs.records))
        self.assertIn("_FailingSink", logs.output[0])
        self.assertIn("phase_started", logs.output[0])

    def test_add_sink_appends_in_order(self) -> None:
        first = _RecordingSink()
        second = _RecordingSink()
        publisher = SinkPublisher([first])
        publisher.add_sink(second)

        publisher.session_complete()

        self.assertEqual((first, second), publisher.sinks)
        self.assertEqual(["session_complete"], first.events)
        self.assertEqual(["session_complete"], second.events)


if __name__ == "__main__":
    unittest.main()
