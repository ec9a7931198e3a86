"""
Rendering and writing of every page in the generated site.
"""

import logging
import os
import shutil
from typing import Dict, Iterable, List

from .content import User
from .placeholders import NAVCLOUD, REDIRECT_TEMPLATE, URL, build_placeholders, substitute
from .ring import RingLink

PREVIOUS_URL_FALLBACK = 'Previous user URL not available'
NEXT_URL_FALLBACK = 'Next user URL not available'

# Top-level output names a tag directory must never replace. Compared
# casefolded since case-insensitive filesystems treat `Users` as `users`.
RESERVED_OUTPUT_NAMES = {'users', 'static', 'images', 'index.html'}


def user_link(name, prefix=''):
    return f'<a href="{prefix}{name}/index.html">{name}</a><br>'


def build_navcloud(tags: Iterable[str]) -> str:
    """Links to every tag's index page, relative to the site root."""
    return ''.join(f'<a href="{tag}/index.html">{tag}</a>' for tag in tags)


def is_safe_tag(tag: str) -> bool:
    """True when ``tag`` can be used as a single directory name under the output root."""
    if tag in ('.', '..') or tag.casefold() in RESERVED_OUTPUT_NAMES:
        return False
    separators = {'/', '\\', os.sep}
    if os.altsep:
        separators.add(os.altsep)
    return not any(sep in tag for sep in separators)


def neighbor_url(entry, fallback):
    url = getattr(entry, 'url', None)
    return fallback if url is None else url


class PageEmitter:
    def __init__(self, base_html, output_dir, users_title='Users'):
        self.base_html = base_html
        self.output_dir = output_dir
        self.users_output_dir = os.path.join(output_dir, 'users')
        self.users_title = users_title
        self.logger = logging.getLogger('Webring.PageEmitter')

    def write_html_file(self, path, content):
        # Shared content is read with newline='' too, so line endings survive.
        with open(path, 'w', encoding='utf-8', newline='') as output_file:
            output_file.write(content)
        self.logger.debug(f"Generated HTML: {path}")

    def render(self, **values):
        return substitute(self.base_html, build_placeholders(**values))

    def create_output_dirs(self):
        os.makedirs(self.output_dir, exist_ok=True)
        os.makedirs(self.users_output_dir, exist_ok=True)

    def copy_directory(self, source, name):
        """Copy ``source`` recursively to ``<output>/<name>``, overwriting existing files."""
        if not os.path.isdir(source):
            raise FileNotFoundError(f"Asset directory not found: {source}")
        destination = os.path.join(self.output_dir, name)
        shutil.copytree(source, destination, dirs_exist_ok=True)
        self.logger.debug(f"Copied {source} -> {destination}")

    def emit_user_pages(self, link: RingLink):
        """
        Write ``users/<name>/`` for the current member of ``link``.

        The profile page gets the user's own link and description. The ring
        itself is realised by ``previous.html`` and ``next.html``, which
        redirect to the neighbours' URLs.
        """
        user = link.current
        user_dir = os.path.join(self.users_output_dir, user.name)
        os.makedirs(user_dir, exist_ok=True)

        page = self.render(
            url=f'<a href="{user.url}">Website</a>',
            content=user.description,
            title=user.name,
        )
        self.write_html_file(os.path.join(user_dir, 'index.html'), page)

        prev_url = neighbor_url(link.previous, PREVIOUS_URL_FALLBACK)
        next_url = neighbor_url(link.next, NEXT_URL_FALLBACK)
        self.write_html_file(os.path.join(user_dir, 'previous.html'), self.render_redirect(prev_url))
        self.write_html_file(os.path.join(user_dir, 'next.html'), self.render_redirect(next_url))

    def render_redirect(self, url):
        return substitute(REDIRECT_TEMPLATE, {URL: url})

    def emit_tag_page(self, tag, users: List[User]):
        tag_dir = os.path.join(self.output_dir, tag)
        os.makedirs(tag_dir, exist_ok=True)
        content = ''.join(user_link(user.name, prefix='../users/') for user in users)
        self.write_html_file(os.path.join(tag_dir, 'index.html'), self.render(content=content, title=tag))

    def emit_tag_pages(self, tag_index: Dict[str, List[User]]):
        """Write one page per tag; returns ``(written, refused)`` tag lists."""
        written, refused = [], []
        for tag, users in tag_index.items():
            if not is_safe_tag(tag):
                self.logger.warning(f"Skipping tag '{tag}': not usable as an output directory name")
                refused.append(tag)
                continue
            self.emit_tag_page(tag, users)
            written.append(tag)
        return written, refused

    def emit_index_page(self, about_html, project_name, tags: Iterable[str]):
        about_content = substitute(about_html, {NAVCLOUD: build_navcloud(tags)})
        page = self.render(content=about_content, title=project_name)
        self.write_html_file(os.path.join(self.output_dir, 'index.html'), page)

    def emit_users_index(self, user_names: Iterable[str]):
        content = ''.join(user_link(name) for name in user_names)
        page = self.render(content=content, title=self.users_title)
        self.write_html_file(os.path.join(self.users_output_dir, 'index.html'), page)
