from __future__ import annotations

from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Integer, SmallInteger, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

OFFICE_PREFIX = "Office: "


class Base(DeclarativeBase): ...


# Workplace (1-M with Person)
class Workplace(Base):
    __tablename__ = "workplaces"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    office_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    coffee_quality: Mapped[Optional[int]] = mapped_column(SmallInteger, nullable=True)

    people: Mapped[list[Person]] = relationship(back_populates="workplace")

    @property
    def display_name(self) -> str:
        return f"{OFFICE_PREFIX}{self.office_name or ''}"


# Profession (M-M with Person through Professional)
class Profession(Base):
    __tablename__ = "professions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)


# Person (M-1 with Workplace, M-M with Profession through Professional)
class Person(Base):
    __tablename__ = "people"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    age: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    alive: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    workplace_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("workplaces.id"),
        nullable=True,
    )
    workplace: Mapped[Optional[Workplace]] = relationship(back_populates="people")

    professionals: Mapped[list[Professional]] = relationship(back_populates="person")

    # has-many-through: read-only view over the join entity
    professions: Mapped[list[Profession]] = relationship(
        secondary="professionals",
        viewonly=True,
    )


# Professional (join entity between Person and Profession)
class Professional(Base):
    __tablename__ = "professionals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    person_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("people.id"),
        nullable=True,
    )
    profession_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("professions.id"),
        nullable=True,
    )

    person: Mapped[Optional[Person]] = relationship(back_populates="professionals")
    profession: Mapped[Optional[Profession]] = relationship()


__all__ = [
    "Base",
    "Person",
    "Profession",
    "Professional",
    "Workplace",
]
