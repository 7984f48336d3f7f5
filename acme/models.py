"""SQLAlchemy models for the Acme dashboard database.

Models implemented:
- UserModel
- CustomerModel
- InvoiceModel (cascades with its customer)
- RevenueModel

Uses SQLAlchemy 2.0 typing (Mapped, mapped_column) and the declarative Base from `acme.database`.
"""

from __future__ import annotations

import datetime
import uuid
from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from acme.database import Base


class UserModel(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    # bcrypt hash, never the plaintext
    password: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"<User id={self.id} email={self.email}>"


class CustomerModel(Base):
    __tablename__ = "customers"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"<Customer id={self.id} name={self.name}>"


class InvoiceModel(Base):
    __tablename__ = "invoices"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    customer_id: Mapped[str] = mapped_column(String(64), ForeignKey("customers.id", ondelete="CASCADE"), nullable=False)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"<Invoice id={self.id} customer={self.customer_id} status={self.status}>"


class RevenueModel(Base):
    __tablename__ = "revenue"

    month: Mapped[str] = mapped_column(String(4), primary_key=True)
    revenue: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"<Revenue month={self.month} revenue={self.revenue}>"


__all__ = ["UserModel", "CustomerModel", "InvoiceModel", "RevenueModel"]
