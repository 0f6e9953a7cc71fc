"""
Main Module
Run driver of the docs sync action
"""

import os
import tempfile

from . import reporter
from .config import load_config
from .errors import ConfigurationError
from .file_source import read_local_files
from .git_checkout import checkout_ref
from .remote_client import GithubObjectClient
from .synchronizer import synchronize


def read_docs(config):
    """Local docs as LocalFiles, or None when the docs folder does not exist

    When config.ref is not the checked out ref the docs are read from a
    temporary copy at that ref, removed again before returning.
    """
    if not config.needs_checkout:
        return read_docs_folder(config.docs_folder, config.docs_folder)

    reporter.info(f"Using git ref {config.ref}")
    with tempfile.TemporaryDirectory(prefix='docs-repo') as temp_dir:
        checkout_dir = checkout_ref(config.own_repo, config.ref, temp_dir, config.server_url, config.token)
        return read_docs_folder(os.path.join(checkout_dir, config.docs_folder), config.docs_folder)

def read_docs_folder(docs_folder, display_name):
    if not os.path.isdir(docs_folder):
        reporter.info(f"Folder {display_name} does not exist, exiting.")
        return None
    return read_local_files(docs_folder)

def run(config, client=None):
    """Synchronize once; returns the SyncResult, or None when there is no docs folder"""
    files = read_docs(config)
    if files is None:
        return None

    if client is None:
        client = GithubObjectClient.from_token(config.token, config.api_url)

    result = synchronize(
        client,
        files,
        upstream_repo=config.upstream_repo,
        own_repo=config.own_repo,
        target_path_prefix=config.target_path,
        base_branch=config.upstream_branch,
        auto_merge_enabled=config.auto_merge,
        source_sha=config.source_sha,
        remove_stale=config.remove_stale,
        max_workers=config.max_workers,
        server_url=config.server_url,
    )

    if not result.skipped:
        reporter.set_output('pull-request-number', result.pull_request_number)
    return result

def main(argv=None):
    """Console entry point; returns the process exit code"""
    try:
        config = load_config(argv)
    except ConfigurationError as e:
        reporter.set_failed(e)
        return 1

    try:
        run(config)
    except Exception as e:
        reporter.error('An unexpected error has ocurred')
        reporter.set_failed(e)
        return 1

    return 0
