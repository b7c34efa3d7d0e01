from focusmode.blocker.config import env_int, env_log_level


def test_env_int_reads_value(monkeypatch):
    monkeypatch.setenv("FOCUS_TEST_INT", "3")
    assert env_int("FOCUS_TEST_INT", 10) == 3


def test_env_int_missing_uses_default(monkeypatch):
    monkeypatch.delenv("FOCUS_TEST_INT", raising=False)
    assert env_int("FOCUS_TEST_INT", 10) == 10


def test_env_int_invalid_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("FOCUS_TEST_INT", "ten")
    assert env_int("FOCUS_TEST_INT", 10) == 10
    assert "FOCUS_TEST_INT" in caplog.text

    monkeypatch.setenv("FOCUS_TEST_INT", "0")
    assert env_int("FOCUS_TEST_INT", 10, minimum=1) == 10


def test_env_log_level(monkeypatch, caplog):
    monkeypatch.setenv("FOCUS_TEST_LEVEL", " debug ")
    assert env_log_level("FOCUS_TEST_LEVEL") == "DEBUG"

    monkeypatch.setenv("FOCUS_TEST_LEVEL", "chatty")
    assert env_log_level("FOCUS_TEST_LEVEL") == "WARNING"
    assert "FOCUS_TEST_LEVEL" in caplog.text
