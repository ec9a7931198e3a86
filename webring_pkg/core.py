import os
import logging
from datetime import datetime
from typing import List

from .content import ContentStore, SkippedUser, User
from .emitter import PageEmitter
from .ring import link_ring, order_users
from .tags import build_tag_index


class InfoFilter(logging.Filter):
    """Filter to allow only selected INFO messages (and all warnings) to be shown in the console."""
    def filter(self, record):
        if record.levelno >= logging.WARNING:
            return True
        allowed_messages = [
            "Site build completed in",
            "Total user pages generated:",
            "Total tag pages generated:",
            "Users skipped:",
            "Copying static assets",
            "Building user pages",
            "Building tag pages",
            "Building index pages",
        ]
        return any(msg in record.getMessage() for msg in allowed_messages)


def setup_logging(project_root, logs_dir='logs'):
    """Set up the ``Webring`` logger: filtered console output plus a full log file."""
    logger = logging.getLogger('Webring')
    logger.setLevel(logging.DEBUG)

    if not logger.handlers:
        # Console handler with filter
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.addFilter(InfoFilter())
        console_handler.setFormatter(logging.Formatter('%(message)s'))
        logger.addHandler(console_handler)

        # File handler for all logs
        log_dir = os.path.join(project_root, logs_dir)
        os.makedirs(log_dir, exist_ok=True)
        log_filename = datetime.now().strftime('webring_%Y-%m-%d_%H-%M-%S.log')

        file_handler = logging.FileHandler(os.path.join(log_dir, log_filename))
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        logger.addHandler(file_handler)

    return logger


class GenerationReport:
    """Outcome of one generation run."""

    def __init__(self):
        self.users_generated: List[str] = []
        self.users_skipped: List[SkippedUser] = []
        self.tags_generated: List[str] = []
        self.tags_refused: List[str] = []

    @property
    def complete(self) -> bool:
        """True when every user and tag found in the project produced a page."""
        return not self.users_skipped and not self.tags_refused


class Webring:
    def __init__(self, project_root='.', output='public', users='users', static='static',
                 images='images', template='static/base.html', about='static/about.html',
                 project_name_file='projectname.txt', users_title='Users'):
        self.store = ContentStore(
            project_root,
            users=users,
            static=static,
            images=images,
            template=template,
            about=about,
            project_name_file=project_name_file,
        )
        self.project_root = self.store.project_root
        self.output_dir = os.path.join(self.project_root, os.path.expanduser(output))
        self.users_title = users_title
        self.logger = logging.getLogger('Webring')

    def build(self) -> GenerationReport:
        """
        Regenerate the whole site.

        Shared content, output directories and static assets are required:
        any failure there propagates and ends the run. Users missing a
        required file are skipped and recorded in the returned report.
        """
        self.logger.info(f"Starting webring build in {self.project_root}")
        report = GenerationReport()

        self.store.validate()
        base_html = self.store.load_template()
        about_html = self.store.load_about()
        project_name = self.store.load_project_name()

        emitter = PageEmitter(base_html, self.output_dir, users_title=self.users_title)
        emitter.create_output_dirs()

        self.logger.info("Copying static assets")
        emitter.copy_directory(self.store.static_dir, 'static')
        emitter.copy_directory(self.store.images_dir, 'images')

        self.logger.info("Building user pages")
        members = self.store.load_users(order_users(self.store.list_user_dirs()))
        for link in link_ring(members):
            if isinstance(link.current, SkippedUser):
                self.logger.warning(f"Skipping user {link.current.name}: {link.current.reason}")
                report.users_skipped.append(link.current)
                continue
            emitter.emit_user_pages(link)
            report.users_generated.append(link.current.name)

        self.logger.info("Building tag pages")
        users = [member for member in members if isinstance(member, User)]
        tag_index = build_tag_index(users)
        report.tags_generated, report.tags_refused = emitter.emit_tag_pages(tag_index)

        self.logger.info("Building index pages")
        emitter.emit_index_page(about_html, project_name, report.tags_generated)
        emitter.emit_users_index(report.users_generated)

        return report

    def users_by_tag(self):
        """Tag index over every renderable user, without writing anything."""
        self.store.validate()
        members = self.store.load_users(order_users(self.store.list_user_dirs()))
        return build_tag_index(member for member in members if isinstance(member, User))
