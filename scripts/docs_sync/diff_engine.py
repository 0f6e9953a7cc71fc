"""
Diff Engine Module
Compares the upstream blobs under a path prefix with the freshly uploaded local blobs
"""

from .models import BLOB


def sort_by_path(entries):
    """Order entries by path using plain string comparison"""
    return sorted(entries, key=lambda entry: entry.path)

def is_under_prefix(path, path_prefix):
    if not path_prefix:
        return True
    prefix = path_prefix.rstrip('/')
    return path == prefix or path.startswith(prefix + '/')

def filter_existing_files(existing, path_prefix):
    """Keep the blob entries that live under path_prefix, sorted by path"""
    return sort_by_path(
        entry for entry in existing
        if entry.type == BLOB and is_under_prefix(entry.path, path_prefix)
    )

def has_changes(existing, updated, path_prefix=None):
    """Tell whether the uploaded blobs differ from the upstream ones

    Blob shas are content addressed, so equal (path, sha) pairs mean equal
    content without ever downloading it.
    """
    existing_files = filter_existing_files(existing, path_prefix)
    updated_files = sort_by_path(updated)

    if len(existing_files) != len(updated_files):
        return True

    for current, candidate in zip(existing_files, updated_files):
        if current.path != candidate.path or current.sha != candidate.sha:
            return True

    return False

def find_removed_paths(existing, updated, path_prefix=None):
    """Upstream blob paths under the prefix that have no local counterpart"""
    updated_paths = {entry.path for entry in updated}
    return [
        entry.path for entry in filter_existing_files(existing, path_prefix)
        if entry.path not in updated_paths
    ]
