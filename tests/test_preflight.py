from git_autopush.errors import NotARepositoryError
from git_autopush.preflight import ensure_git_repository


def test_accepts_directory_with_git_dir(tmp_path):
    (tmp_path / ".git").mkdir()

    assert ensure_git_repository(tmp_path) == tmp_path


def test_accepts_git_file_for_linked_worktrees(tmp_path):
    (tmp_path / ".git").write_text("gitdir: /elsewhere/.git/worktrees/wt\n")

    assert ensure_git_repository(str(tmp_path)) == tmp_path


def test_defaults_to_current_directory(tmp_path, monkeypatch):
    (tmp_path / ".git").mkdir()
    monkeypatch.chdir(tmp_path)

    assert ensure_git_repository().resolve() == tmp_path.resolve()


def test_rejects_directory_without_marker(tmp_path):
    try:
        ensure_git_repository(tmp_path)
    except NotARepositoryError as exc:
        assert "Not a git repository" in str(exc)
    else:
        raise AssertionError("expected NotARepositoryError to be raised")


def test_marker_in_subdirectory_does_not_count(tmp_path):
    (tmp_path / "nested" / ".git").mkdir(parents=True)

    try:
        ensure_git_repository(tmp_path)
    except NotARepositoryError:
        pass
    else:
        raise AssertionError("expected NotARepositoryError to be raised")
