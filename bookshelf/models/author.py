"""
Author Model

Represents an author in the books database.

SQLAlchemy 2.0 Features Used:
- mapped_column(): New way to define columns with full type support
- Mapped[]: Type hint wrapper for SQLAlchemy columns
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from bookshelf.database import Base


class Author(Base):
    """
    Author model representing writers in the system.

    Table: author

    Books reference their author through book.author_id; there is no ORM
    relationship() because that column carries no database constraint.

    Example:
        author = Author(name="J. K. Rowling")
        session.add(author)
        await session.commit()
    """

    __tablename__ = "author"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    # Integer primary keys are assigned by the database from 1 upward,
    # which is what cursor pagination relies on (position 0 = before all rows)
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Author's full name"
    )

    def __repr__(self) -> str:
        """
        Developer-friendly string representation.

            >>> print(Author(id=1, name="J. K. Rowling"))
            Author(id=1, name='J. K. Rowling')
        """
        return f"Author(id={self.id}, name='{self.name}')"
