import pytest

from focusmode.blocker import config


@pytest.fixture
def hosts_file(tmp_path):
    path = tmp_path / "etc" / "hosts"
    path.parent.mkdir()
    path.write_text("127.0.0.1 localhost\n")
    return path


@pytest.fixture
def focus_env(tmp_path, hosts_file, monkeypatch):
    """Points the CLI at throwaway hosts/block-list files and disables DNS flushing."""
    focus_dir = tmp_path / "focus"
    monkeypatch.setattr(config, "HOSTS_PATH", hosts_file)
    monkeypatch.setattr(config, "FOCUS_DIR", focus_dir)
    monkeypatch.setattr(config, "DOMAINS_FILE", focus_dir / "domains.txt")
    monkeypatch.setattr(config, "BACKUP_DIR", focus_dir / "backups")
    monkeypatch.setattr(config, "FLUSH_DNS", False)
    return focus_dir
