"""
@meta
name: shared_git_utils
type: utility
domain: shared
responsibility:
  - Extract git metadata of the local working copy
  - Describe application metadata (name, version, git) for tooling
inputs:
  - Working directory of a git checkout
  - Application meta YAML file
outputs:
  - GitInfo / Commit / AppMeta dataclasses
tags:
  - utility
  - shared
  - git
lifecycle:
  status: active
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from common.constants import APP_META_FILE_PATH
from common.shared.logging_utils import get_logger
from common.shared.yaml_utils import load_yaml

logger = get_logger(__name__)

# Unit separator keeps subjects containing quotes or commas intact
FIELD_SEPARATOR = "\x1f"

PACKAGE_NAME_ARGS = ["rev-parse", "--show-toplevel"]
CURRENT_TAG_ARGS = ["tag", "--points-at", "HEAD"]
REMOTE_URL_ARGS = ["config", "--get", "remote.origin.url"]
BRANCH_ARGS = ["rev-parse", "--abbrev-ref", "HEAD"]
LATEST_COMMIT_ARGS = [
    "log",
    "-n1",
    f"--pretty=format:%H{FIELD_SEPARATOR}%h{FIELD_SEPARATOR}%s{FIELD_SEPARATOR}"
    f"%cD{FIELD_SEPARATOR}%cN{FIELD_SEPARATOR}%cE",
]


class GitError(RuntimeError):
    """Raised when a git command fails."""

    pass


@dataclass
class Committer:
    name: str = ""
    email: str = ""


@dataclass
class Commit:
    id: str = ""
    date: str = ""
    abbr: str = ""
    sub: str = ""
    committer: Committer = field(default_factory=Committer)


@dataclass
class GitInfo:
    package: str = ""
    url: str = ""
    branch: str = ""
    tag: str = ""
    commit: Commit = field(default_factory=Commit)


@dataclass
class AppMeta:
    """Application metadata written by build tooling."""

    name: str = ""
    version: str = ""
    git: Optional[GitInfo] = None


def _run_git(args: List[str], cwd: Optional[Union[str, Path]] = None) -> str:
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
        )
    except OSError as e:
        raise GitError(f"Failed to run git {' '.join(args)}: {e}") from e

    if result.returncode != 0:
        raise GitError(
            f"git {' '.join(args)} failed with return code {result.returncode}: "
            f"{result.stderr.strip()}"
        )
    return result.stdout.rstrip("\n")


def get_package_name(cwd: Optional[Union[str, Path]] = None) -> str:
    """Return the directory name of the repository root."""
    return Path(_run_git(PACKAGE_NAME_ARGS, cwd)).name


def get_current_tag(cwd: Optional[Union[str, Path]] = None) -> str:
    """Return the tag pointing at HEAD, or empty string."""
    return _run_git(CURRENT_TAG_ARGS, cwd)


def get_remote_url(cwd: Optional[Union[str, Path]] = None) -> str:
    """
    Return the origin URL without the ``.git`` suffix.

    SSH remotes drop their ``user@`` part, e.g. ``git@github.com:org/repo.git``
    becomes ``github.com:org/repo``.
    """
    raw_url = _run_git(REMOTE_URL_ARGS, cwd)
    if raw_url.endswith(".git"):
        raw_url = raw_url[: -len(".git")]

    if raw_url.startswith("http"):
        return raw_url

    tokens = raw_url.split("@", 1)
    if len(tokens) == 2:
        return tokens[1]
    return ""


def get_branch(cwd: Optional[Union[str, Path]] = None) -> str:
    """Return the current branch, or empty string on a detached HEAD or any failure."""
    try:
        branch = _run_git(BRANCH_ARGS, cwd)
    except GitError as e:
        logger.debug(f"Unable to resolve git branch: {e}")
        return ""
    return "" if branch == "HEAD" else branch


def get_latest_commit(cwd: Optional[Union[str, Path]] = None) -> Commit:
    """Return the commit HEAD points at."""
    output = _run_git(LATEST_COMMIT_ARGS, cwd)
    parts = output.split(FIELD_SEPARATOR)
    if len(parts) != 6:
        raise GitError(f"Unexpected git log output: {output!r}")

    commit_id, abbr, sub, date, name, email = parts
    return Commit(
        id=commit_id,
        date=date,
        abbr=abbr,
        sub=sub,
        committer=Committer(name=name, email=email),
    )


def get_git_info(cwd: Optional[Union[str, Path]] = None) -> GitInfo:
    """
    Collect all git metadata of the working copy at ``cwd``.

    Raises:
        GitError: If ``cwd`` isn't inside a git repository.
    """
    return GitInfo(
        package=get_package_name(cwd),
        url=get_remote_url(cwd),
        branch=get_branch(cwd),
        tag=get_current_tag(cwd),
        commit=get_latest_commit(cwd),
    )


def _meta_section(value: Any, path: Path, name: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"App meta {name} must be a mapping in {path}, got {type(value).__name__}")
    return value


def read_app_meta(root: Union[str, Path]) -> AppMeta:
    """
    Read application metadata from ``<root>/APP_META_FILE_PATH``.

    Missing sections fall back to dataclass defaults.

    Raises:
        FileNotFoundError: If the meta file does not exist.
        ValueError: If the file or one of its sections is not a mapping.
    """
    path = Path(root) / APP_META_FILE_PATH
    raw = _meta_section(load_yaml(path), path, "document")

    git = None
    git_raw = _meta_section(raw.get("git"), path, "git")
    if git_raw:
        commit_raw = _meta_section(git_raw.get("commit"), path, "git.commit")
        committer_raw = _meta_section(commit_raw.get("committer"), path, "git.commit.committer")
        git = GitInfo(
            package=str(git_raw.get("package", "")),
            url=str(git_raw.get("url", "")),
            branch=str(git_raw.get("branch", "")),
            tag=str(git_raw.get("tag", "")),
            commit=Commit(
                id=str(commit_raw.get("id", "")),
                date=str(commit_raw.get("date", "")),
                abbr=str(commit_raw.get("abbr", "")),
                sub=str(commit_raw.get("sub", "")),
                committer=Committer(
                    name=str(committer_raw.get("name", "")),
                    email=str(committer_raw.get("email", "")),
                ),
            ),
        )

    return AppMeta(
        name=str(raw.get("name", "")),
        version=str(raw.get("version", "")),
        git=git,
    )
