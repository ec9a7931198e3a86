"""
Tag aggregation across webring users.
"""

from typing import Dict, Iterable, List, Set


def parse_tags(text: str) -> Set[str]:
    """Split tag file contents into a set of unique, non-empty tags."""
    return {tag for tag in text.split() if tag}


def build_tag_index(users: Iterable) -> Dict[str, List]:
    """
    Group users by tag.

    Each user's tags are already a set, so a user lands in a bucket at most
    once. Buckets keep the order users are given in (ring order); tags are
    returned sorted so that every run iterates them identically.
    """
    buckets = {}
    for user in users:
        for tag in user.tags:
            buckets.setdefault(tag, []).append(user)
    return {tag: buckets[tag] for tag in sorted(buckets)}
