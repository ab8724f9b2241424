"""Shared test fixtures for churnmap tests."""

import shutil
import subprocess
from pathlib import Path

import pytest

GIT = shutil.which("git")


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


class GitRepo:
    """Throwaway git repository for end-to-end tests."""

    def __init__(self, root: Path):
        self.root = root
        self.git("init", "-q")
        self.git("config", "user.email", "test@test.com")
        self.git("config", "user.name", "Test")
        self.git("config", "commit.gpgsign", "false")

    def git(self, *args: str) -> str:
        result = subprocess.run(
            ["git", "-C", str(self.root), *args],
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout

    def write(self, name: str, content: str) -> Path:
        path = self.root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    def commit(self, name: str, content: str, message: str = "update") -> str:
        self.write(name, content)
        self.git("add", name)
        self.git("commit", "-q", "-m", message)
        return self.git("rev-parse", "HEAD").strip()


@pytest.fixture
def git_repo(tmp_path):
    if GIT is None:
        pytest.skip("git not found")
    repo_dir = tmp_path / "repo"
    repo_dir.mkdir()
    return GitRepo(repo_dir)


@pytest.fixture
def churned_file(git_repo):
    """3-line file: line 1 has 1 commit, line 2 has 5, line 3 is uncommitted.

    Returns (path, list of line-2 commit shas oldest first).
    """
    shas = [git_repo.commit("app.py", "a = 1\nb = 0\n", "init")]
    for i in range(1, 5):
        shas.append(git_repo.commit("app.py", f"a = 1\nb = {i}\n", f"bump b to {i}"))
    path = git_repo.write("app.py", "a = 1\nb = 4\nc = 2\n")
    return path, shas
