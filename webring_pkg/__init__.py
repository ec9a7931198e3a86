"""
Webring - a static site generator for webrings.

Each member of the ring contributes a directory with a URL, a description
and some tags. The generator links members in a circle through previous/next
redirect pages, builds one index page per tag, and writes everything out as
a static HTML site.
"""

__version__ = "1.0.0"

from .core import Webring, GenerationReport

__all__ = ['Webring', 'GenerationReport']
