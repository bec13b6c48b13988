"""
Database models for the catalog (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention for stable
Alembic autogenerate diffs, and exposes `target_metadata` for Alembic.
"""

from decimal import Decimal

from sqlalchemy import Integer, MetaData, Numeric, PrimaryKeyConstraint, String, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Naming convention for deterministic constraint/index names in Alembic diffs
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Products(Base):
    __tablename__ = "products"
    __table_args__ = (PrimaryKeyConstraint("id", name="products_pkey"),)

    id: Mapped[int] = mapped_column(Integer, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))


target_metadata = Base.metadata
