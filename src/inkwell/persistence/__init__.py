"""Inkwell persistence strategies.

Strategies store a rendered payload somewhere durable and report the outcome
as a SaveResult. All of them satisfy the PersistenceStrategy protocol and are
interchangeable from DocumentEditor's point of view.

Available Strategies:
- FileStrategy: Overwrites a file on disk
- DatabaseStrategy: Upserts a named record via SQLAlchemy
- MemoryStrategy: Keeps payloads in a list (tests, dry runs)

"""

from inkwell.persistence.database import DatabaseStrategy
from inkwell.persistence.file import FileStrategy
from inkwell.persistence.memory import MemoryStrategy
from inkwell.persistence.result import SaveResult

__all__ = ["DatabaseStrategy", "FileStrategy", "MemoryStrategy", "SaveResult"]
