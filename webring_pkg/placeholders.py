"""
Literal placeholder substitution for webring templates.

Templates are plain HTML carrying fixed ``$TOKEN`` markers. There is no
template language: each marker is swapped for its value and nothing else.
"""

import re
from typing import Dict, Mapping

URL = '$URL'
PREV_URL = '$PREV_URL'
NEXT_URL = '$NEXT_URL'
CONTENT = '$CONTENT'
TITLE = '$TITLE'
NAVCLOUD = '$NAVCLOUD'

PLACEHOLDER_TOKENS = (URL, PREV_URL, NEXT_URL, CONTENT, TITLE, NAVCLOUD)

REDIRECT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta http-equiv="refresh" content="0; URL='$URL'" />
    <title>Redirecting...</title>
</head>
<body>
    <p>Redirecting...</p>
    <p>$URL</p>
</body>
</html>
"""


def substitute(template: str, values: Mapping[str, str]) -> str:
    """
    Replace every occurrence of each key in ``values`` with its value.

    All replacements are computed against the original template in a single
    pass, so text inserted for one token is never scanned for another.
    Where two keys overlap at the same position the longer one wins.

    Args:
        template: Text containing placeholder tokens
        values: Mapping of literal token to replacement text

    Returns:
        The substituted text
    """
    keys = [key for key in values if key]
    if not keys:
        return template

    keys.sort(key=len, reverse=True)
    pattern = re.compile('|'.join(re.escape(key) for key in keys))
    return pattern.sub(lambda match: values[match.group(0)], template)


def build_placeholders(url: str = '', prev_url: str = '', next_url: str = '',
                       content: str = '', title: str = '', navcloud: str = '') -> Dict[str, str]:
    """Build a complete placeholder map; tokens not given resolve to empty text."""
    return {
        URL: url,
        PREV_URL: prev_url,
        NEXT_URL: next_url,
        CONTENT: content,
        TITLE: title,
        NAVCLOUD: navcloud,
    }
