"""Tests for logging module"""

import json

import pytest

from level_thresholds.config.thresholds import ManualThresholds
from level_thresholds.logging import (
    LogStore,
    ResolutionLogger,
    ResolutionLogEntry,
    get_log_store,
    reset_log_store,
)


class TestLogStore:
    """Tests for LogStore"""

    @pytest.fixture(autouse=True)
    def setup(self):
        """Reset shared log store before each test"""
        reset_log_store()
        yield
        reset_log_store()

    def test_creates_log_directory(self, tmp_path):
        """LogStore creates directory if not exists"""
        log_dir = tmp_path / "logs"
        LogStore(log_dir)
        assert log_dir.exists()

    def test_write_and_read(self, tmp_path):
        """Written records are read back with metadata"""
        store = LogStore(tmp_path, session_id="test_session")

        record = store.write("test", {"indicator": "volume", "value": 42.0})

        entries = store.read_all("test")
        assert entries == [record]
        assert entries[0]["indicator"] == "volume"
        assert entries[0]["_log_type"] == "test"
        assert "_logged_at" in entries[0]

    def test_writes_to_jsonl_format(self, tmp_path):
        """Writes one JSON object per line in a per-session file"""
        store = LogStore(tmp_path, session_id="test_session")

        store.write("test", {"a": 1})
        store.write("test", {"b": 2})

        log_file = tmp_path / "test_test_session.jsonl"
        assert store.path_for("test") == log_file
        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert json.loads(lines[1])["b"] == 2

    def test_sessions_are_separate(self, tmp_path):
        """Stores with different sessions do not see each other's records"""
        LogStore(tmp_path, session_id="first").write("test", {"a": 1})
        assert LogStore(tmp_path, session_id="second").read_all("test") == []

    def test_session_id_auto_generated(self, tmp_path):
        """Session ID is a timestamp if not given"""
        store = LogStore(tmp_path)
        assert store.session_id

    def test_read_missing_log(self, tmp_path):
        """Reading a log that was never written returns nothing"""
        store = LogStore(tmp_path)
        assert store.read_all("nothing") == []

    def test_shared_store_singleton(self, tmp_path):
        """get_log_store returns the same instance until reset"""
        store = get_log_store(tmp_path)
        assert get_log_store() is store
        reset_log_store()
        assert get_log_store(tmp_path) is not store


class TestResolutionLogger:
    """Tests for ResolutionLogger"""

    def test_log_creates_entry(self, log_store, manual):
        """log writes and returns a ResolutionLogEntry"""
        logger = ResolutionLogger(log_store)
        entry = logger.log(
            indicator="volume",
            table=manual,
            value=50.0,
            max_value=100.0,
            resolved="medium",
        )

        assert isinstance(entry, ResolutionLogEntry)
        assert entry.kind == "MANUAL"
        assert entry.used_fallback is False

        stored = log_store.read_all("resolution")
        assert len(stored) == 1
        assert stored[0]["resolved"] == "medium"
        assert stored[0]["value"] == 50.0

    def test_non_json_payload_logged_as_repr(self, log_store):
        """Payloads that are not JSON scalars are logged via repr"""
        payload = ("icon", 3)
        table = ManualThresholds({0: payload})
        logger = ResolutionLogger(log_store)
        logger.log("volume", table, 1.0, 100.0, payload)

        assert log_store.read_all("resolution")[0]["resolved"] == "('icon', 3)"

    def test_uses_shared_store(self, tmp_path, basic):
        """Without a store the shared one is used"""
        reset_log_store()
        try:
            store = get_log_store(tmp_path)
            ResolutionLogger().log("volume", basic, 1.0, 3.0, "medium")
            assert len(store.read_all("resolution")) == 1
        finally:
            reset_log_store()

    def test_summary(self, log_store, basic, manual):
        """Summary counts events, fallbacks, kinds and payloads"""
        logger = ResolutionLogger(log_store)
        logger.log("volume", basic, 10.0, 100.0, "low")
        logger.log("volume", basic, 20.0, 100.0, "low")
        logger.log("volume", basic, 90.0, 100.0, "high")
        logger.log("battery", manual, 5.0, 100.0, None, used_fallback=True)

        summary = logger.get_summary()
        assert summary["total_events"] == 4
        assert summary["fallbacks"] == 1
        assert summary["fallback_rate"] == 0.25
        assert summary["by_kind"] == {"BASIC": 3, "MANUAL": 1}
        assert summary["by_payload"] == {"low": 2, "high": 1}

    def test_summary_for_one_indicator(self, log_store, basic, manual):
        """Summary can be restricted to one indicator"""
        logger = ResolutionLogger(log_store)
        logger.log("volume", basic, 10.0, 100.0, "low")
        logger.log("battery", manual, 5.0, 100.0, None, used_fallback=True)

        summary = logger.get_summary(indicator="battery")
        assert summary["total_events"] == 1
        assert summary["fallback_rate"] == 1.0
        assert summary["by_payload"] == {}

    def test_summary_empty(self, log_store):
        """Empty log gives zero rates"""
        summary = ResolutionLogger(log_store).get_summary()
        assert summary["total_events"] == 0
        assert summary["fallback_rate"] == 0.0
