"""
Tree Walker Module
Handles resolving a branch to its tree and flattening the remote tree under a path prefix
"""

from . import reporter
from .models import BLOB, TREE, FlattenedTreeEntry


def split_prefix(path_prefix):
    """Split 'docs/product' into its non-empty path segments"""
    if not path_prefix:
        return []
    return [segment for segment in path_prefix.split('/') if segment]

def get_current_commit(client, repo, branch):
    """Resolve a branch to (commit sha, root tree sha)"""
    commit_sha = client.get_ref(repo, f"heads/{branch}")
    tree_sha = client.get_commit(repo, commit_sha)
    return commit_sha, tree_sha

def expand_tree(client, repo, leaves, remaining_prefix, parent_path=''):
    """Flatten a tree listing, descending only into trees on the prefix path

    Every leaf of a visited level is kept, blobs and tree markers alike. A tree
    is fetched when the whole prefix has been consumed or when its name is the
    next prefix segment; other trees stay as unexpanded markers.
    """
    entries = []
    head = remaining_prefix[0] if remaining_prefix else None

    for leaf in leaves:
        path = f"{parent_path}/{leaf.path}" if parent_path else leaf.path
        entries.append(FlattenedTreeEntry(path=path, type=leaf.type, sha=leaf.sha))

        if leaf.type != TREE:
            continue
        if head is not None and leaf.path != head:
            continue

        children = client.get_tree(repo, leaf.sha)
        entries.extend(expand_tree(client, repo, children, remaining_prefix[1:], path))

    return entries

def get_complete_tree(client, repo, branch_name, path_prefix):
    """Return the flattened tree of a branch, expanded along path_prefix"""
    _, tree_sha = get_current_commit(client, repo, branch_name)
    root = client.get_tree(repo, tree_sha)

    entries = expand_tree(client, repo, root, split_prefix(path_prefix))

    blob_count = sum(1 for entry in entries if entry.type == BLOB)
    reporter.debug(f"Read {len(entries)} tree entries ({blob_count} blobs) from {repo}@{branch_name}")
    return entries
