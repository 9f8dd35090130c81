"""SQLAlchemy table mappings for the relational store."""
# Standard library imports
from typing import Optional

# External package imports
from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class UserRecord(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    photo: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    hashed_password: Mapped[str] = mapped_column(String(128), nullable=False)
    disabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class CameraRecord(Base):
    __tablename__ = "cameras"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # trimmed, lower-cased name; enforces case-insensitive uniqueness
    name_key: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    device: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    resolution: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    fps: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    post_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    codec: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    preset: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    tune: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    buffer: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    rotation: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
