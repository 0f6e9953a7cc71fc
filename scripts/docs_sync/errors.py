"""
Errors Module
Exception types raised by the docs sync run
"""


class DocsSyncError(Exception):
    """Base class for docs sync errors"""


class ConfigurationError(DocsSyncError):
    """Missing inputs or a structural precondition violated before any remote write"""


class CheckoutError(DocsSyncError):
    """A git command failed while creating the local copy at a ref"""

    def __init__(self, command, returncode, stderr=""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"`{' '.join(command)}` exited with {returncode}: {stderr.strip()}")


class MergeRejectedError(DocsSyncError):
    """The hosting service refused to merge a pull request"""

    def __init__(self, pull_number, message=""):
        self.pull_number = pull_number
        super().__init__(f"Pull-request #{pull_number} was not merged: {message}")
