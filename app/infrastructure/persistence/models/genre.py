"""Genre ORM models. Tables: genre, genre_category (ordered category links)."""

from sqlalchemy import Boolean, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import AggregateModel


class GenreModel(AggregateModel, Base):
    """Persistent state of the Genre aggregate; categories load eagerly (selectin)."""

    __tablename__ = "genre"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    categories: Mapped[list["GenreCategoryModel"]] = relationship(
        back_populates="genre",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="GenreCategoryModel.position",
    )

    __table_args__ = (Index("ix_genre_name", "name"),)


class GenreCategoryModel(Base):
    """Link genre -> category. Composite PK (genre_id, category_id); cascade on both sides."""

    __tablename__ = "genre_category"

    genre_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("genre.id", ondelete="CASCADE"),
        primary_key=True,
    )
    category_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("category.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    genre: Mapped[GenreModel] = relationship(back_populates="categories")
