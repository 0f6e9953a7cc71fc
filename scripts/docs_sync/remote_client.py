"""
Remote Object Client Module
The remote git primitives the sync needs, and their PyGithub implementation

Every call names its repository explicitly, so one client can address the
repository running the action and the upstream docs repository alike.
Nothing is retried or cached here.
"""

from typing import List, Protocol, Sequence

from github import Auth, Github, InputGitTreeElement

from .errors import MergeRejectedError
from .models import TreeLeaf


class RemoteObjectClient(Protocol):
    """Capability interface over the hosting service's git data and pull-request API"""

    def get_ref(self, repo, ref: str) -> str:
        """Return the commit sha a ref such as 'heads/main' points at"""

    def get_commit(self, repo, sha: str) -> str:
        """Return the root tree sha of a commit"""

    def get_tree(self, repo, sha: str) -> List[TreeLeaf]:
        """Return the one-level listing of a tree"""

    def create_blob(self, repo, content: str, encoding: str = 'utf-8') -> str: ...

    def create_tree(self, repo, base_tree: str, entries: Sequence[dict]) -> str: ...

    def create_commit(self, repo, message: str, tree: str, parents: Sequence[str]) -> str: ...

    def create_ref(self, repo, ref: str, sha: str) -> None: ...

    def update_ref(self, repo, ref: str, sha: str, force: bool = False) -> None: ...

    def create_pull(self, repo, title: str, head: str, base: str, body: str) -> int: ...

    def merge_pull(self, repo, pull_number: int, merge_method: str = 'rebase') -> None: ...

    def update_pull(self, repo, pull_number: int, state: str) -> None: ...

    def delete_ref(self, repo, ref: str) -> None: ...

    def create_issue_comment(self, repo, issue_number: int, body: str) -> None: ...


class GithubObjectClient:
    """RemoteObjectClient backed by a PyGithub client

    PyGithub builds trees and commits from GitTree and GitCommit objects, not
    shas, so create_tree fetches the base tree and create_commit fetches the
    new tree and every parent first: one extra GET per object on top of the
    POST. Build the PyGithub client with lazy=True (from_token does) so that
    repositories are not fetched on every call.
    """

    def __init__(self, github_client):
        self._github = github_client

    @classmethod
    def from_token(cls, token, base_url=None):
        """Build a client authenticated with a personal or workflow token"""
        kwargs = {'auth': Auth.Token(token), 'lazy': True}
        if base_url:
            kwargs['base_url'] = base_url
        return cls(Github(**kwargs))

    def _repository(self, repo):
        return self._github.get_repo(repo.full_name)

    def get_ref(self, repo, ref):
        return self._repository(repo).get_git_ref(ref).object.sha

    def get_commit(self, repo, sha):
        return self._repository(repo).get_git_commit(sha).tree.sha

    def get_tree(self, repo, sha):
        tree = self._repository(repo).get_git_tree(sha)
        return [TreeLeaf(path=element.path, type=element.type, sha=element.sha) for element in tree.tree]

    def create_blob(self, repo, content, encoding='utf-8'):
        return self._repository(repo).create_git_blob(content, encoding).sha

    def create_tree(self, repo, base_tree, entries):
        repository = self._repository(repo)
        base = repository.get_git_tree(base_tree)
        elements = [
            InputGitTreeElement(path=entry['path'], mode=entry['mode'], type=entry['type'], sha=entry['sha'])
            for entry in entries
        ]
        return repository.create_git_tree(elements, base).sha

    def create_commit(self, repo, message, tree, parents):
        repository = self._repository(repo)
        git_tree = repository.get_git_tree(tree)
        parent_commits = [repository.get_git_commit(sha) for sha in parents]
        return repository.create_git_commit(message, git_tree, parent_commits).sha

    def create_ref(self, repo, ref, sha):
        self._repository(repo).create_git_ref(ref=ref, sha=sha)

    def update_ref(self, repo, ref, sha, force=False):
        self._repository(repo).get_git_ref(ref).edit(sha, force=force)

    def create_pull(self, repo, title, head, base, body):
        pull = self._repository(repo).create_pull(base=base, head=head, title=title, body=body)
        return pull.number

    def merge_pull(self, repo, pull_number, merge_method='rebase'):
        pull = self._repository(repo).get_pull(pull_number)
        status = pull.merge(merge_method=merge_method)
        if not status.merged:
            raise MergeRejectedError(pull_number, status.message)

    def update_pull(self, repo, pull_number, state):
        self._repository(repo).get_pull(pull_number).edit(state=state)

    def delete_ref(self, repo, ref):
        self._repository(repo).get_git_ref(ref).delete()

    def create_issue_comment(self, repo, issue_number, body):
        self._repository(repo).get_issue(issue_number).create_comment(body)
