"""Strongly typed identifiers for forum entities.

Identifiers are database-assigned integers; NewType keeps a PostId from
being passed where a UserId is expected.
"""

from typing import NewType

UserId = NewType("UserId", int)
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
LikeId = NewType("LikeId", int)
PostTagId = NewType("PostTagId", int)
