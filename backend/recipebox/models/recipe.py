"""
RecipeBox Backend: Recipe SQLAlchemy Model
==========================================

What:  ORM model representing the `recipes` table.
Who:   Used by RecipeStore for every read and write, and by init_db() to
       create the table on startup.

Table layout (SQLite DDL emitted by create_all):
    CREATE TABLE recipes (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        poster TEXT NOT NULL,
        ingredients TEXT NOT NULL,
        instructions TEXT NOT NULL,
        image TEXT NOT NULL,
        liked INTEGER DEFAULT 0,
        favorited INTEGER DEFAULT 0
    )

    AUTOINCREMENT guarantees ids are never reused after a delete, so ids
    handed out within a run are strictly increasing.
"""

from sqlalchemy import Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from recipebox.database import Base


class Recipe(Base):
    """
    One persisted recipe.

    Lifecycle:
        1. Created by POST /api/recipes after its image file is written
        2. `liked` / `favorited` overwritten in place by the PUT endpoints
        3. Deleted by DELETE /api/recipes/{id}; the image file goes with it

    `image` holds the server-local path of the uploaded file. Clients never
    see it directly; the service layer rewrites it to a public URL.
    """

    __tablename__ = "recipes"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(Text, nullable=False)
    poster: Mapped[str] = mapped_column(Text, nullable=False)

    # Free-form text, stored exactly as submitted
    ingredients: Mapped[str] = mapped_column(Text, nullable=False)
    instructions: Mapped[str] = mapped_column(Text, nullable=False)

    image: Mapped[str] = mapped_column(Text, nullable=False)

    # 0/1 flags, set directly by the client (never incremented)
    liked: Mapped[int] = mapped_column(Integer, default=0, server_default=text("0"))
    favorited: Mapped[int] = mapped_column(Integer, default=0, server_default=text("0"))

    def __repr__(self) -> str:
        return f"<Recipe(id={self.id}, name='{self.name}', poster='{self.poster}')>"
