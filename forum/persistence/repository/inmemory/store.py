"""Shared state for the in-memory repositories."""

from collections import defaultdict

from forum.domain.model import Comment, Like, Post, PostTag, User


class InMemoryStore:
    """Tables held as dicts keyed by ID.

    Every in-memory repository of one unit of work shares a store, so counts
    that join across tables (comments per post, likes received by an author)
    can be computed the way the SQL repositories compute them.
    """

    def __init__(self) -> None:
        self.users: dict[int, User] = {}
        self.posts: dict[int, Post] = {}
        self.comments: dict[int, Comment] = {}
        self.likes: dict[int, Like] = {}
        self.post_tags: dict[int, PostTag] = {}
        self._sequences: defaultdict[str, int] = defaultdict(int)

    def next_id(self, table: str) -> int:
        """Return the next identity value for a table, starting at 1."""
        self._sequences[table] += 1
        return self._sequences[table]
