"""
File Source Module
Reads the local docs folder into LocalFile records
"""

import base64
import os
from pathlib import Path

from . import reporter
from .models import BASE64, UTF8, LocalFile

BINARY_EXTENSIONS = ('png', 'jpg', 'jpeg', 'gif')


def is_binary_file(name):
    """Images are uploaded base64 encoded, everything else as UTF-8 text"""
    return name.lower().endswith(BINARY_EXTENSIONS)

def find_all_files(root_path):
    """Find all files in the directory tree, in a stable order"""
    all_files = []
    for root, dirs, files in os.walk(root_path):
        dirs.sort()
        for file in sorted(files):
            all_files.append(os.path.join(root, file))
    return all_files

def read_local_file(docs_folder, file_path):
    """Images and anything that is not valid UTF-8 are kept as base64"""
    name = Path(os.path.relpath(file_path, docs_folder)).as_posix()
    with open(file_path, 'rb') as f:
        data = f.read()

    if not is_binary_file(name):
        try:
            return LocalFile(name=name, content=data.decode('utf-8'), encoding=UTF8)
        except UnicodeDecodeError:
            reporter.debug(f"{name} is not UTF-8 text, uploading it base64 encoded")

    return LocalFile(name=name, content=base64.b64encode(data).decode('ascii'), encoding=BASE64)

def read_local_files(docs_folder):
    """Read every file under docs_folder; names are relative and '/'-separated"""
    return [read_local_file(docs_folder, file_path) for file_path in find_all_files(docs_folder)]
