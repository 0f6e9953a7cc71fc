"""
PR Lifecycle Manager Module
Handles creating, auto-merging and cleaning up the sync pull-request
"""

from . import reporter
from .models import PullRequest

MERGE_METHOD = 'rebase'


def create_pull_request(client, repo, title, head, base, body):
    number = client.create_pull(repo, title, head, base, body)
    return PullRequest(number=number, head=head, base=base, title=title, body=body)

def merge_pull_request(client, repo, pull_number):
    client.merge_pull(repo, pull_number, merge_method=MERGE_METHOD)

def close_pull_request_and_delete_branch(client, repo, pull_number, head, reason):
    """Explain, close and drop the branch of a pull-request that could not be merged

    Nothing here is caught: a failure in any step ends the run.
    """
    client.create_issue_comment(repo, pull_number, reason)
    client.update_pull(repo, pull_number, state='closed')
    client.delete_ref(repo, f"heads/{head}")

def complete_pull_request(client, repo, pull, auto_merge_enabled):
    """Merge the pull-request when enabled, cleaning up if the merge is refused

    Returns True only when the pull-request was merged.
    """
    if not auto_merge_enabled:
        reporter.info('Auto merge skipped due to action configuration')
        return False

    reporter.debug('Trying to automatically merge pull-request')
    try:
        merge_pull_request(client, repo, pull.number)
    except Exception as e:
        reporter.debug('Pull-request auto merge failed')
        reporter.debug(e)
        reporter.warning(f"⚠️  Could not merge pull-request #{pull.number}, closing it")

        close_pull_request_and_delete_branch(
            client,
            repo,
            pull.number,
            pull.head,
            f'Failed to merge pull-request to branch "{pull.base}"',
        )
        return False

    reporter.info(f"✅ Merged pull-request #{pull.number} into {pull.base}")
    return True
