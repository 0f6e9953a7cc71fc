"""Shared fixtures for docs sync tests."""

import hashlib

import pytest

from docs_sync.models import RepoRef, TreeLeaf


class FakeObjectClient:
    """In-memory RemoteObjectClient that records every call.

    Trees are registered by sha; blob shas are derived from (content, encoding)
    so identical content always gets the same sha.
    """

    def __init__(self):
        self.calls = []
        self.refs = {}
        self.commits = {}
        self.trees = {}
        self.merge_error = None
        self.next_pull_number = 1

    def _record(self, name, **kwargs):
        self.calls.append((name, kwargs))

    def call_names(self):
        return [name for name, _ in self.calls]

    def calls_named(self, name):
        return [kwargs for call, kwargs in self.calls if call == name]

    # -- setup helpers ----------------------------------------------------

    def add_branch(self, branch, commit_sha, tree_sha):
        self.refs[f"heads/{branch}"] = commit_sha
        self.commits[commit_sha] = tree_sha

    def add_tree(self, sha, leaves):
        self.trees[sha] = [TreeLeaf(*leaf) for leaf in leaves]

    @staticmethod
    def blob_sha(content, encoding='utf-8'):
        return hashlib.sha1(f"{encoding}:{content}".encode('utf-8')).hexdigest()

    # -- RemoteObjectClient ---------------------------------------------

    def get_ref(self, repo, ref):
        self._record('get_ref', repo=repo, ref=ref)
        return self.refs[ref]

    def get_commit(self, repo, sha):
        self._record('get_commit', repo=repo, sha=sha)
        return self.commits[sha]

    def get_tree(self, repo, sha):
        self._record('get_tree', repo=repo, sha=sha)
        return list(self.trees[sha])

    def create_blob(self, repo, content, encoding='utf-8'):
        self._record('create_blob', repo=repo, content=content, encoding=encoding)
        return self.blob_sha(content, encoding)

    def create_tree(self, repo, base_tree, entries):
        self._record('create_tree', repo=repo, base_tree=base_tree, entries=list(entries))
        return 'new-tree-sha'

    def create_commit(self, repo, message, tree, parents):
        self._record('create_commit', repo=repo, message=message, tree=tree, parents=list(parents))
        return 'new-commit-sha'

    def create_ref(self, repo, ref, sha):
        self._record('create_ref', repo=repo, ref=ref, sha=sha)

    def update_ref(self, repo, ref, sha, force=False):
        self._record('update_ref', repo=repo, ref=ref, sha=sha, force=force)

    def create_pull(self, repo, title, head, base, body):
        self._record('create_pull', repo=repo, title=title, head=head, base=base, body=body)
        number = self.next_pull_number
        self.next_pull_number += 1
        return number

    def merge_pull(self, repo, pull_number, merge_method='rebase'):
        self._record('merge_pull', repo=repo, pull_number=pull_number, merge_method=merge_method)
        if self.merge_error is not None:
            raise self.merge_error

    def update_pull(self, repo, pull_number, state):
        self._record('update_pull', repo=repo, pull_number=pull_number, state=state)

    def delete_ref(self, repo, ref):
        self._record('delete_ref', repo=repo, ref=ref)

    def create_issue_comment(self, repo, issue_number, body):
        self._record('create_issue_comment', repo=repo, issue_number=issue_number, body=body)


@pytest.fixture
def client():
    return FakeObjectClient()


@pytest.fixture
def upstream():
    return RepoRef('vtex', 'internal-docs')


@pytest.fixture
def own_repo():
    return RepoRef('vtex', 'action-internal-docs')


@pytest.fixture
def docs_tree(client):
    """Upstream 'main' with a three level tree.

    Tree:
        README.md, src/ (never expanded),
        docs/index.md, docs/x/ (target), docs/y/ (never expanded),
        docs/x/a.md, docs/x/guide/b.md
    """
    client.add_branch('main', 'base-commit-sha', 'root-tree')
    client.add_tree('root-tree', [
        ('README.md', 'blob', 'readme-sha'),
        ('docs', 'tree', 'docs-tree'),
        ('src', 'tree', 'src-tree'),
    ])
    client.add_tree('docs-tree', [
        ('index.md', 'blob', 'index-sha'),
        ('x', 'tree', 'x-tree'),
        ('y', 'tree', 'y-tree'),
    ])
    client.add_tree('x-tree', [
        ('a.md', 'blob', 'a-sha'),
        ('guide', 'tree', 'guide-tree'),
    ])
    client.add_tree('guide-tree', [
        ('b.md', 'blob', 'b-sha'),
    ])
    return client
