"""Pydantic schemas for the seed dataset and the seed endpoint responses."""

from __future__ import annotations

import datetime
import uuid
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field, model_validator

# Namespace for invoice ids derived from their content
INVOICE_NAMESPACE = uuid.UUID("3f1c7e52-8a4b-5d2e-9c61-0b7a4e2f9d18")


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


# ----------------------------- Dataset ---------------------------------
class UserSeed(BaseModel):
    id: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=1)


class CustomerSeed(BaseModel):
    id: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    image_url: str = Field(..., min_length=1, max_length=255)


class InvoiceSeed(BaseModel):
    """An invoice row.

    Without an explicit `id`, the id is a UUIDv5 of customer, amount, status and
    date, so two invoices with identical content share an id. `SeedDataset`
    rejects such duplicates; give them explicit ids to keep both.
    """

    id: Optional[str] = Field(None, min_length=1, max_length=64)
    customer_id: str = Field(..., min_length=1, max_length=64)
    amount: int
    status: InvoiceStatus
    date: datetime.date

    @model_validator(mode="after")
    def derive_id(self):
        """Give id-less invoices a stable id so a re-run conflicts instead of duplicating."""
        if self.id is None:
            key = f"{self.customer_id}|{self.amount}|{self.status.value}|{self.date.isoformat()}"
            self.id = str(uuid.uuid5(INVOICE_NAMESPACE, key))
        return self


class RevenueSeed(BaseModel):
    month: str = Field(..., min_length=1, max_length=4)
    revenue: int


class SeedDataset(BaseModel):
    users: List[UserSeed] = Field(default_factory=list)
    customers: List[CustomerSeed] = Field(default_factory=list)
    invoices: List[InvoiceSeed] = Field(default_factory=list)
    revenue: List[RevenueSeed] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_invoice_ids(self):
        seen = set()
        for invoice in self.invoices:
            if invoice.id in seen:
                raise ValueError(f"duplicate invoice id {invoice.id} (customer {invoice.customer_id}, {invoice.date})")
            seen.add(invoice.id)
        return self


# ----------------------------- Responses ---------------------------------
class SeedResponse(BaseModel):
    message: str = "Database seeded successfully"


class SeedErrorResponse(BaseModel):
    error: str
