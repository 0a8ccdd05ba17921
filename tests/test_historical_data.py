from meridianscan.historical_data import HistoricalData, SessionRecord
from meridianscan.scan_session import ScanSession


def _filled():
    history = HistoricalData()
    history.add("alice", "2024-01-01 10:00:00", ScanSession("2024-01-01 10:00:00"))
    history.add("bob", "2024-01-02 10:00:00", ScanSession("2024-01-02 10:00:00"))
    history.add("alice", "2024-01-03 10:00:00", ScanSession("2024-01-03 10:00:00"))
    return history


def test_empty_history():
    history = HistoricalData()
    assert len(history) == 0
    assert history.sessions() == []


def test_add_returns_record_with_fields():
    history = HistoricalData()
    scan = ScanSession("d")
    record = history.add("carol", "d", scan)
    assert record == SessionRecord("carol", "d", scan)
    assert record.scan is scan
    assert len(history) == 1


def test_iteration_keeps_insertion_order():
    names = [record.name for record in _filled()]
    assert names == ["alice", "bob", "alice"]


def test_remove_drops_all_with_name():
    history = _filled()
    history.remove("alice")
    assert [record.name for record in history] == ["bob"]
    assert len(history) == 1


def test_remove_unknown_name_changes_nothing():
    history = _filled()
    history.remove("nobody")
    assert len(history) == 3


def test_sessions_returns_copy():
    history = _filled()
    listing = history.sessions()
    listing.clear()
    assert len(history) == 3


def test_record_unpacks_as_tuple():
    history = _filled()
    name, date, scan = history.sessions()[1]
    assert name == "bob"
    assert date == scan.date