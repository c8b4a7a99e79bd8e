"""
Book Model

Represents a book and the id of the author who wrote it.

WHY no ForeignKey?
==================
author_id is deliberately a plain indexed integer. Books can be added for an
author id that does not exist (or whose author was deleted later); the API
resolves such a book's author to null instead of rejecting the write.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from bookshelf.database import Base


class Book(Base):
    """
    Book model.

    Table: book

    Indexes:
    - Primary key on id (automatic)
    - author_id: For listing an author's books
    """

    __tablename__ = "book"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        comment="Book title"
    )

    author_id: Mapped[int] = mapped_column(
        Integer,
        index=True,
        nullable=False,
        comment="Id of the author (not enforced)"
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, name='{self.name}', author_id={self.author_id})"
