"""
Read-only view over a webring project on disk.

Layout::

    projectname.txt
    static/base.html
    static/about.html
    users/<name>/url.txt
    users/<name>/description.html
    users/<name>/tags.txt
"""

import logging
import os
from typing import Iterable, List, NamedTuple, Optional, Set, Tuple, Union

from .tags import parse_tags

URL_FILE = 'url.txt'
DESCRIPTION_FILE = 'description.html'
TAGS_FILE = 'tags.txt'

# Written into the users output directory beside the per-user directories.
USERS_INDEX_FILE = 'index.html'


class User(NamedTuple):
    name: str
    path: str
    url: str
    description: str
    tags: frozenset


class SkippedUser(NamedTuple):
    """A user directory that cannot produce a page, with the reason why."""
    name: str
    path: str
    reason: str
    url: Optional[str] = None


UserResult = Union[User, SkippedUser]


class ContentStore:
    def __init__(self, project_root, users='users', static='static', images='images',
                 template='static/base.html', about='static/about.html',
                 project_name_file='projectname.txt'):
        self.project_root = os.path.abspath(project_root)
        self.users_dir = self._resolve(users)
        self.static_dir = self._resolve(static)
        self.images_dir = self._resolve(images)
        self.template_path = self._resolve(template)
        self.about_path = self._resolve(about)
        self.project_name_path = self._resolve(project_name_file)
        self.logger = logging.getLogger('Webring.ContentStore')

    def _resolve(self, path):
        # Absolute paths pass through os.path.join untouched.
        return os.path.join(self.project_root, os.path.expanduser(path))

    def project_exists(self) -> bool:
        return os.path.isfile(self.project_name_path)

    def validate(self):
        """Raise FileNotFoundError unless the project root holds a webring."""
        if not os.path.isdir(self.project_root):
            raise FileNotFoundError(f"Project directory not found: {self.project_root}")
        if not self.project_exists():
            raise FileNotFoundError(
                f"No webring found in {self.project_root}: missing "
                f"{os.path.relpath(self.project_name_path, self.project_root)}"
            )

    def _read_required(self, path, label) -> str:
        try:
            with open(path, 'r', encoding='utf-8', newline='') as f:
                return f.read()
        except (IOError, OSError) as e:
            self.logger.error(f"Failed to read {label} {path}: {e}")
            raise

    def load_template(self) -> str:
        return self._read_required(self.template_path, 'base template')

    def load_about(self) -> str:
        return self._read_required(self.about_path, 'about page')

    def load_project_name(self) -> str:
        return self._read_required(self.project_name_path, 'project name').strip()

    def list_user_dirs(self) -> List[Tuple[str, str]]:
        """
        List ``(name, path)`` for each user directory, in directory order.

        Plain files and dot-entries under ``users/`` are ignored.
        """
        if not os.path.isdir(self.users_dir):
            self.logger.warning(f"Users directory does not exist: {self.users_dir}")
            return []

        entries = []
        for name in os.listdir(self.users_dir):
            path = os.path.join(self.users_dir, name)
            if name.startswith('.') or not os.path.isdir(path):
                continue
            entries.append((name, path))
        return entries

    def read_url(self, user_path) -> str:
        with open(os.path.join(user_path, URL_FILE), 'r', encoding='utf-8') as f:
            return f.read()

    def read_description(self, user_path) -> str:
        # Descriptions are pre-formed HTML; undecodable bytes are replaced.
        with open(os.path.join(user_path, DESCRIPTION_FILE), 'rb') as f:
            return f.read().decode('utf-8', errors='replace')

    def read_tags(self, user_path) -> Set[str]:
        """Read a user's tags; a missing or unreadable tags file means no tags."""
        tags_path = os.path.join(user_path, TAGS_FILE)
        try:
            with open(tags_path, 'r', encoding='utf-8') as f:
                return parse_tags(f.read())
        except FileNotFoundError:
            self.logger.debug(f"No tags file at {tags_path}")
        except (IOError, OSError, UnicodeDecodeError) as e:
            self.logger.debug(f"Error reading tags file {tags_path}: {e}")
        return set()

    def load_user(self, name, path) -> UserResult:
        """Load one user, or describe why the user cannot be rendered."""
        try:
            url = self.read_url(path)
        except (IOError, OSError, UnicodeDecodeError) as e:
            return SkippedUser(name, path, f"cannot read {URL_FILE}: {e}")

        if name.casefold() == USERS_INDEX_FILE:
            return SkippedUser(name, path, "name collides with users index", url=url)

        try:
            description = self.read_description(path)
        except (IOError, OSError) as e:
            return SkippedUser(name, path, f"cannot read {DESCRIPTION_FILE}: {e}", url=url)

        return User(name, path, url, description, frozenset(self.read_tags(path)))

    def load_users(self, entries: Iterable[Tuple[str, str]]) -> List[UserResult]:
        return [self.load_user(name, path) for name, path in entries]
