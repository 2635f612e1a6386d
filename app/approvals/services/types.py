from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CommitRecord:
    sha: str
    author_login: str = ""
    committer_name: str = ""
    committer_email: str = ""


@dataclass(frozen=True)
class PullRequestSnapshot:
    number: int
    is_draft: bool = False
    is_from_fork: bool = False
    author_login: str = ""
    commits: tuple[CommitRecord, ...] = ()


@dataclass(frozen=True)
class RepositoryRef:
    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"
