"""
data_model — struktury danych narzędzi profilu.

Użycie:
  from data_model import ProfileData, BlockSpan, ...

Moduły:
  documents — BlockSpan, Document
  profile   — ProfileData, Friend, Album, Group, Badge, SocialLink,
              Comment, Reply
"""

from .documents import (
    BlockSpan,
    Document,
)
from .profile import (
    Album,
    Badge,
    Comment,
    Friend,
    Group,
    ProfileData,
    Reply,
    SocialLink,
)

__all__ = [
    # documents
    "BlockSpan",
    "Document",
    # profile
    "Album",
    "Badge",
    "Comment",
    "Friend",
    "Group",
    "ProfileData",
    "Reply",
    "SocialLink",
]
