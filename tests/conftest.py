"""Test configuration and fixtures for Webring tests."""

import pytest
import tempfile
import shutil
import os
from pathlib import Path

import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

BASE_TEMPLATE = """<html>
<head><title>$TITLE</title></head>
<body>
<div id="url">$URL</div>
<div id="prev">$PREV_URL</div>
<div id="next">$NEXT_URL</div>
<div id="content">$CONTENT</div>
<div id="cloud">$NAVCLOUD</div>
</body>
</html>
"""

ABOUT_TEXT = "<p>Welcome to the ring.</p>\n<nav>$NAVCLOUD</nav>\n"

PNG_DATA = b'\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x02\x00\x00\x00\x90wS\xde'


def add_user(project_dir, name, url=None, description=None, tags=None):
    """Create a user directory; files passed as None are not created."""
    user_dir = Path(project_dir) / 'users' / name
    user_dir.mkdir(parents=True, exist_ok=True)
    if url is not None:
        (user_dir / 'url.txt').write_text(url, encoding='utf-8')
    if description is not None:
        (user_dir / 'description.html').write_text(description, encoding='utf-8')
    if tags is not None:
        (user_dir / 'tags.txt').write_text(tags, encoding='utf-8')
    return user_dir


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def empty_project(temp_dir):
    """A webring project with shared content and assets but no users."""
    project_dir = Path(temp_dir) / 'ring'
    static_dir = project_dir / 'static'
    images_dir = project_dir / 'images' / 'icons'

    static_dir.mkdir(parents=True)
    images_dir.mkdir(parents=True)
    (project_dir / 'users').mkdir()

    (project_dir / 'projectname.txt').write_text('Test Ring\n', encoding='utf-8')
    (static_dir / 'base.html').write_text(BASE_TEMPLATE, encoding='utf-8')
    (static_dir / 'about.html').write_text(ABOUT_TEXT, encoding='utf-8')
    (static_dir / 'style.css').write_text('body { color: #222; }\n', encoding='utf-8')
    (images_dir / 'logo.png').write_bytes(PNG_DATA)

    return str(project_dir)


@pytest.fixture
def project_dir(empty_project):
    """A webring project with two users, alice and bob."""
    add_user(empty_project, 'alice', url='https://alice.example',
             description='<p>Alice writes Rust.</p>', tags='rust blog')
    add_user(empty_project, 'bob', url='https://bob.example',
             description='<p>Bob blogs.</p>', tags='blog')
    return empty_project
