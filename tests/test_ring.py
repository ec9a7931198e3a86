"""Tests for ring ordering and linking."""

import pytest
import os

import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from webring_pkg.content import SkippedUser
from webring_pkg.ring import RingLink, link_ring, order_users, ring_neighbors


class TestRingNeighbors:
    """Test cases for ring_neighbors()."""

    @pytest.mark.parametrize('count', [1, 2, 3, 7])
    def test_wraps_at_both_ends(self, count):
        """Indices wrap around the first and last members."""
        for index in range(count):
            prev_index, next_index = ring_neighbors(index, count)
            assert prev_index == (index - 1 + count) % count
            assert next_index == (index + 1) % count

    def test_single_member_is_its_own_neighbor(self):
        """A ring of one links to itself on both sides."""
        assert ring_neighbors(0, 1) == (0, 0)

    def test_empty_ring_raises(self):
        """There are no neighbours in an empty ring."""
        with pytest.raises(ValueError):
            ring_neighbors(0, 0)

    def test_index_out_of_range_raises(self):
        """Indices outside the ring are rejected."""
        with pytest.raises(ValueError):
            ring_neighbors(3, 3)


class TestLinkRing:
    """Test cases for link_ring() and order_users()."""

    @pytest.mark.parametrize('count', [1, 2, 5])
    def test_successor_and_predecessor(self, count):
        """next(u_i) == u_(i+1 mod N) and prev(u_i) == u_(i-1 mod N)."""
        names = [f'u{i}' for i in range(count)]
        links = link_ring(names)

        assert [link.current for link in links] == names
        for i, link in enumerate(links):
            assert link.next == names[(i + 1) % count]
            assert link.previous == names[(i - 1 + count) % count]

    def test_following_successors_returns_to_start(self):
        """N steps along the ring come back to the first member."""
        names = ['a', 'b', 'c', 'd']
        successor = {link.current: link.next for link in link_ring(names)}
        current = 'a'
        for _ in range(len(names)):
            current = successor[current]
        assert current == 'a'

    def test_empty_input(self):
        """No members, no links."""
        assert link_ring([]) == []

    def test_single_member(self):
        """The only member is its own predecessor and successor."""
        assert link_ring(['solo']) == [RingLink('solo', 'solo', 'solo')]

    def test_order_is_stable_for_same_set(self):
        """Any enumeration order of the same users gives the same ring."""
        first = order_users([('carol', '/c'), ('alice', '/a'), ('bob', '/b')])
        second = order_users([('bob', '/b'), ('carol', '/c'), ('alice', '/a')])
        assert first == second
        assert [name for name, _ in first] == ['alice', 'bob', 'carol']

    def test_order_is_codepoint_order(self):
        """Uppercase sorts before lowercase; no locale folding."""
        ordered = order_users([('bob', ''), ('Zed', ''), ('alice', '')])
        assert [name for name, _ in ordered] == ['Zed', 'alice', 'bob']

    def test_orders_named_entries(self):
        """Objects with a name attribute are ordered by it."""
        ordered = order_users([SkippedUser('b', '/b', 'x'), SkippedUser('a', '/a', 'y')])
        assert [entry.name for entry in ordered] == ['a', 'b']
