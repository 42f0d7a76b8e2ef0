"""
Models package — table descriptions of the schema the query layer expects.

The query functions issue literal SQL and never go through these classes;
they exist so tests and local tooling can build the schema with
Base.metadata.create_all.
"""

from tracker.models.base import Base
from tracker.models.issue import IssueRow
from tracker.models.user import UserRow

__all__ = ["Base", "IssueRow", "UserRow"]
