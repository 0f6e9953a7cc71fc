"""
Reporter Module
Handles console output and GitHub Actions workflow commands
"""

import os
import threading
from contextlib import contextmanager

# Thread-safe printing
print_lock = threading.Lock()

def thread_safe_print(*args, **kwargs):
    """Thread-safe print function"""
    with print_lock:
        print(*args, **kwargs)

def _escape_data(value):
    """Escape a message for use in a workflow command"""
    return str(value).replace('%', '%25').replace('\r', '%0D').replace('\n', '%0A')

def _command(name, message):
    thread_safe_print(f"::{name}::{_escape_data(message)}", flush=True)

def info(message):
    thread_safe_print(message, flush=True)

def debug(message):
    """Only visible when the workflow runs with step debug logging enabled"""
    _command('debug', message)

def warning(message):
    _command('warning', message)

def error(message):
    _command('error', message)

@contextmanager
def group(title):
    """Fold everything printed inside the block into one collapsible log group"""
    thread_safe_print(f"::group::{_escape_data(title)}", flush=True)
    try:
        yield
    finally:
        thread_safe_print("::endgroup::", flush=True)

def set_output(name, value):
    """Expose a step output to later workflow steps"""
    output_file = os.environ.get('GITHUB_OUTPUT')
    if output_file:
        with open(output_file, 'a', encoding='utf-8') as f:
            f.write(f"{name}={value}\n")
    else:
        # Runners without GITHUB_OUTPUT still understand the legacy command
        _command(f"set-output name={name}", value)

def set_failed(message):
    """Report a failure; the caller decides the exit code"""
    error(f"❌ {message}")
