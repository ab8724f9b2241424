"""Query git for the commits that touched a single line of a file."""

from __future__ import annotations

import os
import re
import subprocess
from pathlib import Path
from typing import Optional, Sequence, Union

from ..config import ChurnMapConfig
from ..exceptions import HistoryCommandError, UntrackedFileError
from ..logging_config import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


def run_git(
    args: Sequence[str],
    cwd: Optional[PathLike] = None,
    git_executable: str = "git",
    timeout: int = 30,
) -> str:
    """Run a git command and return its stdout.

    Arguments are passed as an argv list, never through a shell, so paths
    containing quotes, spaces or ``;`` reach git verbatim.

    Raises:
        HistoryCommandError: git could not be started, timed out, or exited
            non-zero.
    """
    cmd = [git_executable, *args]
    logger.debug("Running git command: %s", " ".join(cmd))
    try:
        completed = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise HistoryCommandError(cmd, None, str(e)) from e

    if completed.returncode != 0:
        raise HistoryCommandError(cmd, completed.returncode, completed.stderr)
    return completed.stdout


def find_repo_root(path: PathLike, git_executable: str = "git") -> Optional[Path]:
    """Return the top-level directory of the repository containing ``path``.

    Returns None when ``path`` is not inside a git work tree.
    """
    target = Path(path).resolve()
    start_dir = target if target.is_dir() else target.parent
    if not start_dir.is_dir():
        return None
    try:
        out = run_git(
            ["rev-parse", "--show-toplevel"], cwd=start_dir, git_executable=git_executable, timeout=5
        )
    except HistoryCommandError as e:
        logger.debug("No repository for %s: %s", target, e)
        return None
    top = out.strip()
    return Path(top).resolve() if top else None


def is_tracked(repo_root: PathLike, path: PathLike, git_executable: str = "git") -> bool:
    """Return True if ``path`` is in the index of the repository at ``repo_root``."""
    rel = _relative_to(Path(repo_root), path)
    try:
        run_git(
            ["ls-files", "--error-unmatch", "--", rel],
            cwd=repo_root,
            git_executable=git_executable,
            timeout=5,
        )
    except HistoryCommandError:
        return False
    return True


def require_tracked(path: Optional[PathLike], git_executable: str = "git") -> Path:
    """Return the repository root for a tracked file.

    Raises:
        UntrackedFileError: ``path`` is None, missing, outside any repository
            or not tracked by it.
    """
    if path is None:
        raise UntrackedFileError(None, "no backing file")
    file_path = Path(path)
    if not file_path.is_file():
        raise UntrackedFileError(file_path, "not a file on disk")
    repo_root = find_repo_root(file_path, git_executable=git_executable)
    if repo_root is None:
        raise UntrackedFileError(file_path, "not inside a git repository")
    if not is_tracked(repo_root, file_path, git_executable=git_executable):
        raise UntrackedFileError(file_path, "not tracked by git")
    return repo_root


def _relative_to(repo_root: Path, path: PathLike) -> str:
    return Path(os.path.relpath(Path(path).resolve(), repo_root.resolve())).as_posix()


class LineHistoryQuery:
    """Run ``git log -L`` for one line at a time and parse the commit ids."""

    def __init__(
        self,
        repo_root: PathLike,
        git_executable: str = "git",
        commit_id_min_length: int = 7,
        timeout_seconds: int = 30,
    ):
        self.repo_root = Path(repo_root).resolve()
        self.git_executable = git_executable
        self.timeout_seconds = timeout_seconds
        # Full hash with --pretty=oneline; abbreviated ids when the user's
        # config sets log.abbrevCommit. Diff lines from -L never start with hex
        # followed by whitespace, they carry a +, -, space, @@ or diff prefix.
        self._commit_re = re.compile(rf"^([0-9a-f]{{{commit_id_min_length},}})(?:\s|$)")

    @classmethod
    def from_config(cls, repo_root: PathLike, config: ChurnMapConfig) -> "LineHistoryQuery":
        return cls(
            repo_root,
            git_executable=config.git_executable,
            commit_id_min_length=config.commit_id_min_length,
            timeout_seconds=config.timeout_seconds,
        )

    def commits_for_line(self, file_path: PathLike, line_number: int) -> list[str]:
        """Return the ids of commits that touched ``line_number``, oldest first.

        A failing git command counts as no history for that line.
        """
        rel = _relative_to(self.repo_root, file_path)
        args = [
            "log",
            "-L",
            f"{line_number},{line_number}:{rel}",
            "--pretty=oneline",
            "--no-color",
        ]
        try:
            output = run_git(
                args,
                cwd=self.repo_root,
                git_executable=self.git_executable,
                timeout=self.timeout_seconds,
            )
        except HistoryCommandError as e:
            logger.debug("Treating %s:%d as unchanged: %s", rel, line_number, e)
            return []

        commits = self.parse_commit_ids(output)
        # git log is newest first
        commits.reverse()
        return commits

    def parse_commit_ids(self, output: str) -> list[str]:
        commits = []
        for line in output.splitlines():
            match = self._commit_re.match(line)
            if match:
                commits.append(match.group(1))
        return commits
