"""
Synchronizer Module
Main orchestration of one sync run: upload, diff, commit, pull-request
"""

import uuid
from concurrent.futures import ThreadPoolExecutor

from . import reporter
from .commit_builder import create_branch_and_commit
from .diff_engine import find_removed_paths, has_changes, sort_by_path
from .errors import ConfigurationError
from .models import SyncResult, UploadedBlob
from .pr_manager import complete_pull_request, create_pull_request
from .tree_walker import get_complete_tree

ACTION_URL = 'http://github.com/vtex/action-internal-docs'
DEFAULT_SERVER_URL = 'https://github.com'


def get_new_branch_name(own_repo, source_sha=None):
    """Branch name for one run, unique even when a commit is synced twice"""
    parts = ['docs', own_repo.formatted]
    if source_sha:
        parts.append(source_sha[:9])
    parts.append(uuid.uuid4().hex[:8])
    return '-'.join(parts)

def to_upstream_path(path_prefix, name):
    """Place a docs-relative file name under the upstream prefix"""
    name = name.replace('\\', '/').lstrip('/')
    prefix = path_prefix.strip('/')
    return f"{prefix}/{name}" if prefix else name

def _commit_url(own_repo, source_sha, server_url):
    return f"{server_url}/{own_repo.full_name}/commit/{source_sha}"

def build_commit_message(own_repo, source_sha=None, server_url=DEFAULT_SERVER_URL):
    lines = [
        f"Documentation sync [from {own_repo.full_name}]",
        '',
        'Automatic synchronization triggered via GitHub Action.',
    ]
    if source_sha:
        lines.append(f"This sync refers to the commit {_commit_url(own_repo, source_sha, server_url)}")
    return '\n'.join(lines)

def build_pull_request_body(own_repo, source_sha=None, server_url=DEFAULT_SERVER_URL):
    lines = ['Documentation synchronization from [GitHub action]', '']
    if source_sha:
        lines += [
            'This update is refers to the following commit:',
            '',
            _commit_url(own_repo, source_sha, server_url),
            '',
        ]
    lines.append(f"[GitHub action]: {ACTION_URL}")
    return '\n'.join(lines)

def upload_file(client, repo, file, path_prefix):
    """Store one local file as a blob in repo"""
    path = to_upstream_path(path_prefix, file.name)
    sha = client.create_blob(repo, file.content, file.encoding)
    return UploadedBlob(sha=sha, path=path, content=file.content, encoding=file.encoding)

def upload_files(client, repo, files, path_prefix, max_workers=8):
    """Create one blob per local file, concurrently, keeping the input order"""
    files = list(files)
    if not files:
        return []

    reporter.debug(f"Uploading {len(files)} blobs with {min(max_workers, len(files))} workers")
    with ThreadPoolExecutor(max_workers=min(max_workers, len(files)), thread_name_prefix='Blob') as executor:
        return list(executor.map(lambda file: upload_file(client, repo, file, path_prefix), files))

def synchronize(client, local_files, upstream_repo, own_repo, target_path_prefix, base_branch,
                auto_merge_enabled, source_sha=None, remove_stale=False, max_workers=8,
                server_url=DEFAULT_SERVER_URL):
    """Open a pull-request upstream when the local docs differ from target_path_prefix

    Returns SyncResult(skipped=True) when nothing changed. Every failure other
    than a refused merge propagates to the caller.
    """
    if not target_path_prefix or not target_path_prefix.strip('/'):
        raise ConfigurationError('A target path prefix is required')

    local_files = list(local_files)
    reporter.info(f"📄 Syncing {len(local_files)} local files to {upstream_repo}:{target_path_prefix}")

    complete_tree = get_complete_tree(client, upstream_repo, base_branch, target_path_prefix)
    updated_files = sort_by_path(upload_files(client, upstream_repo, local_files, target_path_prefix, max_workers))

    if not has_changes(complete_tree, updated_files, target_path_prefix):
        reporter.info("Documentation haven't been changed, skipping docs pull-request")
        return SyncResult(skipped=True)

    removed_paths = []
    if remove_stale:
        removed_paths = find_removed_paths(complete_tree, updated_files, target_path_prefix)
        if removed_paths:
            reporter.info(f"🗑️  Removing {len(removed_paths)} stale upstream files")

    if not updated_files:
        raise ConfigurationError('There are no local files to commit')

    branch_to_push = get_new_branch_name(own_repo, source_sha)
    try:
        create_branch_and_commit(
            client,
            upstream_repo,
            base_branch=base_branch,
            branch_name=branch_to_push,
            message=build_commit_message(own_repo, source_sha, server_url),
            files=updated_files,
            removed_paths=removed_paths,
        )
    except Exception:
        reporter.error(f"Failed to create and push commits to branch {branch_to_push}")
        raise

    reporter.debug('Creating pull-request for branch')
    pull = create_pull_request(
        client,
        upstream_repo,
        title=f"Docs sync ({own_repo.full_name})",
        head=branch_to_push,
        base=base_branch,
        body=build_pull_request_body(own_repo, source_sha, server_url),
    )
    reporter.info(f"Created pull-request {server_url}/{upstream_repo.full_name}/pull/{pull.number}")

    merged = complete_pull_request(client, upstream_repo, pull, auto_merge_enabled)
    return SyncResult(skipped=False, pull_request_number=pull.number, merged=merged, branch=branch_to_push)
