"""
Git Checkout Module
Creates a throwaway local copy of the repository at a given ref
"""

import base64
import subprocess
from pathlib import Path
from urllib.parse import quote, urlsplit

from . import reporter
from .errors import CheckoutError


def build_remote_url(server_url, repo):
    """Clone URL of repo on server_url, keeping only the server origin"""
    parts = urlsplit(server_url or 'https://github.com')
    origin = f"{parts.scheme}://{parts.netloc}"
    return f"{origin}/{quote(repo.owner, safe='')}/{quote(repo.name, safe='')}.git"

def auth_header_args(token):
    """Git config arguments that authenticate a fetch the way actions/checkout does"""
    if not token:
        return []
    basic = base64.b64encode(f"x-access-token:{token}".encode('utf-8')).decode('ascii')
    return ['-c', f"http.extraheader=AUTHORIZATION: basic {basic}"]

def run_git(args, cwd):
    command = ['git', *args]
    result = subprocess.run(
        command,
        cwd=cwd,
        capture_output=True,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        # Never echo the auth header back into the logs
        shown = ['git', *['<redacted>' if arg.startswith('http.extraheader') else arg for arg in args]]
        raise CheckoutError(shown, result.returncode, result.stderr)
    return result.stdout

def checkout_ref(repo, ref, target_dir, server_url=None, token=None):
    """Fetch ref of repo into the empty directory target_dir and return its path

    The caller owns target_dir and removes it once the docs have been read.
    """
    checkout_dir = str(target_dir)
    remote_url = build_remote_url(server_url, repo)

    with reporter.group(f'Creating local repository copy from ref "{ref}"'):
        run_git(['init'], checkout_dir)
        run_git(['remote', 'add', 'origin', remote_url], checkout_dir)
        run_git([*auth_header_args(token), 'fetch', 'origin', ref], checkout_dir)
        run_git(['checkout', 'FETCH_HEAD'], checkout_dir)

    return Path(checkout_dir)
