"""
Models Module
Value types passed between the tree walker, diff engine, commit builder and PR manager
"""

from dataclasses import dataclass
from typing import Optional

BLOB = 'blob'
TREE = 'tree'

# Regular (non-executable) file mode in git tree objects
FILE_MODE = '100644'

UTF8 = 'utf-8'
BASE64 = 'base64'


@dataclass(frozen=True)
class RepoRef:
    """A remote repository, addressed by owner and name"""
    owner: str
    name: str

    @classmethod
    def parse(cls, full_name):
        """Parse 'owner/name' into a RepoRef"""
        owner, sep, name = full_name.strip().partition('/')
        if not sep or not owner or not name or '/' in name:
            raise ValueError(f"Expected repository as 'owner/name', got {full_name!r}")
        return cls(owner, name)

    @property
    def full_name(self):
        return f"{self.owner}/{self.name}"

    @property
    def formatted(self):
        """Owner and name joined with a dash, safe to embed in a branch name"""
        return f"{self.owner}-{self.name}"

    def __str__(self):
        return self.full_name


@dataclass(frozen=True)
class TreeLeaf:
    """One entry of a single-level tree listing"""
    path: str
    type: str
    sha: str


@dataclass(frozen=True)
class FlattenedTreeEntry:
    """A tree entry with its path qualified from the repository root"""
    path: str
    type: str
    sha: str


@dataclass(frozen=True)
class LocalFile:
    name: str
    content: str
    encoding: str = UTF8


@dataclass(frozen=True)
class UploadedBlob:
    """A local file after it has been stored as a remote blob"""
    sha: str
    path: str
    content: str
    encoding: str = UTF8


@dataclass(frozen=True)
class PullRequest:
    number: int
    head: str
    base: str
    title: str
    body: str


@dataclass(frozen=True)
class SyncResult:
    """Outcome of one synchronization run

    skipped is True when the upstream already matched the local docs; otherwise
    pull_request_number identifies the opened pull-request and merged tells
    whether auto-merge landed it.
    """
    skipped: bool
    pull_request_number: Optional[int] = None
    merged: bool = False
    branch: Optional[str] = None
