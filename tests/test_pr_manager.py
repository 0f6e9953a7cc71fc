"""Tests for pr_manager: pull-request creation, merge and compensation."""

import pytest

from docs_sync.pr_manager import (
    close_pull_request_and_delete_branch,
    complete_pull_request,
    create_pull_request,
)


@pytest.fixture
def pull(client, upstream):
    pr = create_pull_request(client, upstream, 'Docs sync', 'docs-branch', 'main', 'body')
    client.calls.clear()
    return pr


class TestCreatePullRequest:
    def test_returns_pull_request(self, client, upstream):
        pr = create_pull_request(client, upstream, 'Docs sync', 'docs-branch', 'main', 'body')
        assert pr.number == 1
        assert (pr.head, pr.base, pr.title) == ('docs-branch', 'main', 'Docs sync')
        assert client.calls_named('create_pull')[0]['head'] == 'docs-branch'


class TestCompletePullRequest:
    def test_auto_merge_disabled(self, client, upstream, pull):
        assert complete_pull_request(client, upstream, pull, auto_merge_enabled=False) is False
        assert client.calls == []

    def test_merges_with_rebase(self, client, upstream, pull):
        assert complete_pull_request(client, upstream, pull, auto_merge_enabled=True) is True
        assert client.calls_named('merge_pull') == [
            {'repo': upstream, 'pull_number': pull.number, 'merge_method': 'rebase'},
        ]
        assert client.call_names() == ['merge_pull']

    def test_rejected_merge_is_cleaned_up(self, client, upstream, pull):
        client.merge_error = RuntimeError('merge conflict')

        assert complete_pull_request(client, upstream, pull, auto_merge_enabled=True) is False
        assert client.call_names() == ['merge_pull', 'create_issue_comment', 'update_pull', 'delete_ref']
        assert client.calls_named('create_issue_comment')[0]['issue_number'] == pull.number
        assert 'main' in client.calls_named('create_issue_comment')[0]['body']
        assert client.calls_named('update_pull')[0]['state'] == 'closed'
        assert client.calls_named('delete_ref')[0]['ref'] == 'heads/docs-branch'

    def test_cleanup_failure_propagates(self, client, upstream, pull):
        client.merge_error = RuntimeError('protected branch')

        def broken(*args, **kwargs):
            raise ConnectionError('network down')

        client.update_pull = broken
        with pytest.raises(ConnectionError):
            complete_pull_request(client, upstream, pull, auto_merge_enabled=True)
        assert 'delete_ref' not in client.call_names()


class TestClosePullRequest:
    def test_order(self, client, upstream):
        close_pull_request_and_delete_branch(client, upstream, 7, 'docs-vtex-action-internal-docs-7a2fdbabd', 'why')
        assert client.calls == [
            ('create_issue_comment', {'repo': upstream, 'issue_number': 7, 'body': 'why'}),
            ('update_pull', {'repo': upstream, 'pull_number': 7, 'state': 'closed'}),
            ('delete_ref', {'repo': upstream, 'ref': 'heads/docs-vtex-action-internal-docs-7a2fdbabd'}),
        ]
