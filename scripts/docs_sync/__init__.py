#!/usr/bin/env python3
"""
Internal Docs Sync

Pushes the docs folder of a repository to the internal docs repository as a
pull-request, built from git objects through the GitHub API.

Modules:
- remote_client: remote git primitives and their PyGithub implementation
- tree_walker: branch resolution and tree flattening under a path prefix
- diff_engine: blob identity comparison between upstream and local files
- commit_builder: tree, commit and branch creation
- pr_manager: pull-request creation, auto-merge and cleanup
- synchronizer: orchestration of one sync run
- file_source, git_checkout, config, reporter: action plumbing
- main: run driver
"""

from .models import RepoRef, SyncResult
from .synchronizer import synchronize

__all__ = ["RepoRef", "SyncResult", "synchronize"]
