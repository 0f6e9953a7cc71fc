"""
Config Module
Collects the action inputs from the environment and the command line
"""

import argparse
import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError
from .models import RepoRef

# Configuration - defaults used when the workflow leaves an input empty
# ==========================================
INTERNAL_DOCS_REPO_OWNER = 'vtex'
INTERNAL_DOCS_REPO_NAME = 'internal-docs'
INTERNAL_DOCS_DEFAULT_BRANCH = 'main'
DOCS_FOLDER = 'docs'
DEFAULT_SERVER_URL = 'https://github.com'
DEFAULT_MAX_WORKERS = 8
# ==========================================


@dataclass(frozen=True)
class SyncConfig:
    token: str
    product: str
    upstream_repo: RepoRef
    upstream_branch: str
    own_repo: RepoRef
    auto_merge: bool = False
    remove_stale: bool = False
    ref: str = ''
    ref_name: str = ''
    source_sha: Optional[str] = None
    docs_folder: str = DOCS_FOLDER
    server_url: str = DEFAULT_SERVER_URL
    api_url: Optional[str] = None
    max_workers: int = DEFAULT_MAX_WORKERS

    @property
    def target_path(self):
        return f"docs/{self.product}"

    @property
    def needs_checkout(self):
        """True when the docs must be read from another ref than the one checked out"""
        return bool(self.ref) and self.ref != self.ref_name


def get_input(name, environ=None):
    """Read an action input the way the runner exposes it: INPUT_<NAME>"""
    environ = os.environ if environ is None else environ
    key = 'INPUT_' + name.replace(' ', '_').upper()
    return environ.get(key, '').strip()

def parse_bool(value):
    """Only the literal 'true' enables a flag, as in the workflow syntax"""
    return str(value).strip().lower() == 'true'

def build_parser():
    parser = argparse.ArgumentParser(
        prog='docs-sync',
        description='Synchronize the local docs folder with the internal docs repository',
    )
    parser.add_argument('--repo-token', help='token with write access to the upstream repository')
    parser.add_argument('--docs-product', help='product name; files go to docs/<product> upstream')
    parser.add_argument('--repo-owner', help=f'upstream owner (default: {INTERNAL_DOCS_REPO_OWNER})')
    parser.add_argument('--repo-name', help=f'upstream name (default: {INTERNAL_DOCS_REPO_NAME})')
    parser.add_argument('--repo-branch', help=f'upstream base branch (default: {INTERNAL_DOCS_DEFAULT_BRANCH})')
    parser.add_argument('--auto-merge', help="'true' to rebase-merge the pull-request right away")
    parser.add_argument('--remove-stale', help="'true' to delete upstream files missing locally")
    parser.add_argument('--ref', help='read the docs from this git ref of the current repository')
    parser.add_argument('--docs-folder', help=f'local docs folder (default: {DOCS_FOLDER})')
    parser.add_argument('--max-workers', type=int, help='concurrent blob uploads')
    return parser

def load_config(argv=None, environ=None):
    """Merge command line arguments over action inputs over defaults"""
    environ = os.environ if environ is None else environ
    args = build_parser().parse_args(argv)

    def pick(arg_value, input_name, default=''):
        if arg_value not in (None, ''):
            return arg_value
        return get_input(input_name, environ) or default

    token = pick(args.repo_token, 'repo-token', environ.get('GITHUB_TOKEN', ''))
    if not token:
        raise ConfigurationError('Input required and not supplied: repo-token')

    product = pick(args.docs_product, 'docs-product').strip('/')
    if not product:
        raise ConfigurationError('Input required and not supplied: docs-product')

    own_repository = environ.get('GITHUB_REPOSITORY', '')
    if not own_repository:
        raise ConfigurationError('GITHUB_REPOSITORY is not set; run inside a GitHub workflow')
    try:
        own_repo = RepoRef.parse(own_repository)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e

    max_workers = args.max_workers or DEFAULT_MAX_WORKERS
    if max_workers < 1:
        raise ConfigurationError('--max-workers must be at least 1')

    return SyncConfig(
        token=token,
        product=product,
        upstream_repo=RepoRef(
            pick(args.repo_owner, 'repo-owner', INTERNAL_DOCS_REPO_OWNER),
            pick(args.repo_name, 'repo-name', INTERNAL_DOCS_REPO_NAME),
        ),
        upstream_branch=pick(args.repo_branch, 'repo-branch', INTERNAL_DOCS_DEFAULT_BRANCH),
        own_repo=own_repo,
        auto_merge=parse_bool(pick(args.auto_merge, 'auto-merge', 'false')),
        remove_stale=parse_bool(pick(args.remove_stale, 'remove-stale', 'false')),
        ref=pick(args.ref, 'ref'),
        ref_name=environ.get('GITHUB_REF_NAME', ''),
        source_sha=environ.get('GITHUB_SHA') or None,
        docs_folder=pick(args.docs_folder, 'docs-folder', DOCS_FOLDER),
        server_url=environ.get('GITHUB_SERVER_URL') or DEFAULT_SERVER_URL,
        api_url=environ.get('GITHUB_API_URL') or None,
        max_workers=max_workers,
    )
