from storefront.builder.autosave import DebouncedSaver


def test_only_the_last_schedule_in_the_window_saves(fake_timers):
    calls = []
    saver = DebouncedSaver(lambda: calls.append("save"), delay=2.0, timer_factory=fake_timers)

    saver.schedule()
    saver.schedule()
    saver.schedule()

    first, second, third = fake_timers.created
    assert first.cancelled and second.cancelled and not third.cancelled
    assert third.interval == 2.0 and third.daemon and third.started

    # A superseded timer that fires anyway is ignored
    first.fire()
    assert calls == []

    third.fire()
    assert calls == ["save"]
    assert not saver.pending


def test_cancel_drops_pending_save(fake_timers):
    calls = []
    saver = DebouncedSaver(lambda: calls.append("save"), timer_factory=fake_timers)

    saver.schedule()
    assert saver.pending
    assert saver.cancel() is True
    assert saver.cancel() is False

    fake_timers.created[0].fire()
    assert calls == []


def test_flush_runs_pending_save_immediately(fake_timers):
    calls = []
    saver = DebouncedSaver(lambda: calls.append("save"), timer_factory=fake_timers)

    assert saver.flush() is False
    saver.schedule()
    assert saver.flush() is True
    assert calls == ["save"]
    assert fake_timers.created[0].cancelled


def test_callback_errors_are_logged_not_raised(fake_timers, caplog):
    def boom():
        raise RuntimeError("store offline")

    saver = DebouncedSaver(boom, timer_factory=fake_timers)
    saver.schedule()
    fake_timers.created[0].fire()

    assert "Auto-save callback failed" in caplog.text
