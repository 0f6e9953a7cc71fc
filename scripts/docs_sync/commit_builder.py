"""
Commit Builder Module
Handles building a commit from uploaded blobs and publishing it as a new branch
"""

from . import reporter
from .errors import ConfigurationError
from .models import BLOB, FILE_MODE
from .tree_walker import get_current_commit


def build_tree_entries(shas, paths, removed_paths=()):
    """Pair blob shas with their paths as tree entries

    Removed paths become entries without a sha, which deletes them from the
    base tree.
    """
    if not shas or len(shas) != len(paths):
        raise ConfigurationError('You should provide the same number of blobs and paths')

    all_paths = list(paths) + list(removed_paths)
    if len(set(all_paths)) != len(all_paths):
        raise ConfigurationError('Each path may appear only once in a commit')

    tree = [
        {'path': path, 'mode': FILE_MODE, 'type': BLOB, 'sha': sha}
        for sha, path in zip(shas, paths)
    ]
    tree.extend(
        {'path': path, 'mode': FILE_MODE, 'type': BLOB, 'sha': None}
        for path in removed_paths
    )
    return tree

def create_branch_and_commit(client, repo, base_branch, branch_name, message, files, removed_paths=()):
    """Commit files on top of base_branch and point a new branch at the commit

    files are objects with path and sha. The ref is created last, so a failure
    on the way leaves only unreferenced objects upstream. Returns the new
    commit sha.
    """
    files = list(files)
    tree = build_tree_entries(
        [file.sha for file in files],
        [file.path for file in files],
        removed_paths,
    )

    commit_sha, tree_sha = get_current_commit(client, repo, base_branch)
    reporter.debug(f"Base branch {base_branch} is at {commit_sha} (tree {tree_sha})")

    new_tree_sha = client.create_tree(repo, tree_sha, tree)
    new_commit_sha = client.create_commit(repo, message, new_tree_sha, [commit_sha])
    client.create_ref(repo, f"refs/heads/{branch_name}", new_commit_sha)

    reporter.info(f"🌿 Pushed {len(tree)} file(s) to {repo}@{branch_name} ({new_commit_sha[:9]})")
    return new_commit_sha
