import pytest

from storefront.builder.history import HistoryStack


def snap(n):
    return {"sections": [{"id": f"sec_{n}", "order": 0}], "global_styles": {"primaryColor": f"#{n:06d}"}}


def test_push_advances_index_and_stores_deep_copies():
    history = HistoryStack(snap(0))
    entry = snap(1)

    assert history.push(entry) is True
    entry["sections"][0]["id"] = "mutated"

    assert history.index == 1
    assert len(history) == 2
    assert history.current == snap(1)


def test_undo_and_redo_are_noops_at_the_boundaries():
    history = HistoryStack(snap(0))

    assert history.undo() is None
    assert history.redo() is None
    assert history.index == 0


def test_undo_sets_skip_flag_so_next_push_is_swallowed():
    history = HistoryStack(snap(0))
    history.push(snap(1))

    assert history.undo() == snap(0)
    assert history.push(snap(0)) is False
    assert len(history) == 2
    assert history.can_redo

    # The flag is consumed once; the next push records again and drops the redo branch
    assert history.push(snap(2)) is True
    assert len(history) == 2
    assert history.current == snap(2)
    assert not history.can_redo


def test_redo_after_undo_round_trips():
    history = HistoryStack(snap(0))
    history.push(snap(1))

    history.undo()
    history.push(snap(0))

    assert history.redo() == snap(1)
    assert history.index == 1


def test_history_is_capped_and_drops_oldest():
    history = HistoryStack(snap(0), limit=50)
    for n in range(1, 51):
        history.push(snap(n))

    assert len(history) == 50
    assert history.index == 49
    assert history.current == snap(50)

    # Oldest retained entry is now snap(1)
    for _ in range(49):
        history.undo()
        history.push(None)
    assert history.current == snap(1)
    assert history.undo() is None


def test_reset_discards_all_entries():
    history = HistoryStack(snap(0))
    history.push(snap(1))
    history.reset(snap(9))

    assert len(history) == 1
    assert history.index == 0
    assert history.current == snap(9)


def test_limit_must_be_positive():
    with pytest.raises(ValueError):
        HistoryStack(snap(0), limit=0)
