"""
Helpers for turning authored text into description HTML.

Site generation never calls these; descriptions are used verbatim. They back
the ``describe`` command so authors can produce ``description.html`` ahead of
time.
"""

import os

import mistune

MARKDOWN_EXTENSIONS = ('.md', '.markdown')


def txt_to_html(text):
    """Wrap each newline-delimited line of plain text in a paragraph tag."""
    return '<p>{}</p>'.format(text.replace('\n', '</p><p>'))


def create_markdown_parser():
    """Create a Mistune markdown parser with a custom renderer."""
    class CustomRenderer(mistune.HTMLRenderer):
        def __init__(self):
            super().__init__(escape=False)

        def block_code(self, code, info=None):
            escaped_code = mistune.escape(code)
            return '<pre style="white-space: pre-wrap;"><code>{}</code></pre>'.format(escaped_code)
    return mistune.create_markdown(
        renderer=CustomRenderer(),
        plugins=['table', 'task_lists', 'strikethrough']
    )


def markdown_to_html(text):
    """Convert markdown text to HTML."""
    return create_markdown_parser()(text)


def convert_file(source_path):
    """Read ``source_path`` and convert it by extension (Markdown or plain text)."""
    with open(source_path, 'r', encoding='utf-8') as f:
        text = f.read()
    if os.path.splitext(source_path)[1].lower() in MARKDOWN_EXTENSIONS:
        return markdown_to_html(text)
    return txt_to_html(text)
