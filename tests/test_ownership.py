import pytest

from focusmode.blocker import ownership
from focusmode.blocker.backup_helper import backup_hosts
from focusmode.blocker.domains import ensure_domains_file


@pytest.fixture
def chowns(monkeypatch):
    calls = []
    monkeypatch.setattr(ownership.os, "chown", lambda path, uid, gid: calls.append((path, uid, gid)), raising=False)
    monkeypatch.setattr(ownership.os, "geteuid", lambda: 0, raising=False)
    return calls


@pytest.fixture
def under_sudo(monkeypatch):
    monkeypatch.setenv("SUDO_UID", "1234")
    monkeypatch.setenv("SUDO_GID", "5678")


def test_block_list_created_under_sudo_goes_to_caller(tmp_path, chowns, under_sudo):
    path = tmp_path / "home" / ".focus" / "domains.txt"
    ensure_domains_file(path)
    assert chowns == [
        (tmp_path / "home", 1234, 5678),
        (tmp_path / "home" / ".focus", 1234, 5678),
        (path, 1234, 5678),
    ]


def test_existing_block_list_is_left_alone(tmp_path, chowns, under_sudo):
    path = tmp_path / "domains.txt"
    path.write_text("x.com\n")
    ensure_domains_file(path)
    assert chowns == []


def test_backups_created_under_sudo_go_to_caller(hosts_file, tmp_path, chowns, under_sudo):
    backup_dir = tmp_path / "backups"
    backup = backup_hosts(hosts_file, backup_dir, keep=5)
    assert chowns == [(backup_dir, 1234, 5678), (backup, 1234, 5678)]

    second = backup_hosts(hosts_file, backup_dir, keep=5)
    assert chowns[-1] == (second, 1234, 5678)
    assert len(chowns) == 3


def test_no_chown_without_sudo(tmp_path, chowns, monkeypatch):
    monkeypatch.delenv("SUDO_UID", raising=False)
    monkeypatch.delenv("SUDO_GID", raising=False)
    ensure_domains_file(tmp_path / "focus" / "domains.txt")
    assert chowns == []


def test_no_chown_when_not_root(tmp_path, chowns, under_sudo, monkeypatch):
    monkeypatch.setattr(ownership.os, "geteuid", lambda: 1000, raising=False)
    ensure_domains_file(tmp_path / "focus" / "domains.txt")
    assert chowns == []


def test_chown_failure_is_logged(tmp_path, under_sudo, monkeypatch, caplog):
    def refuse(path, uid, gid):
        raise PermissionError(1, "Operation not permitted")

    monkeypatch.setattr(ownership.os, "geteuid", lambda: 0, raising=False)
    monkeypatch.setattr(ownership.os, "chown", refuse, raising=False)
    path = tmp_path / "domains.txt"
    assert ensure_domains_file(path) is True
    assert path.exists()
    assert "Could not give" in caplog.text


def test_missing_dirs_lists_outermost_first(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    assert ownership.missing_dirs(target) == [tmp_path / "a", tmp_path / "a" / "b", target]
    assert ownership.missing_dirs(tmp_path) == []
