from sqlalchemy import inspect

from acme.models import CustomerModel, InvoiceModel
from acme.seed import seed_database


def test_revenue_month_is_the_only_key(db_engine, small_dataset):
    seed_database(db_engine, small_dataset, rounds=4)

    inspector = inspect(db_engine)
    assert inspector.get_pk_constraint("revenue")["constrained_columns"] == ["month"]
    assert inspector.get_unique_constraints("revenue") == []
    assert inspector.get_indexes("revenue") == []


def test_invoice_customer_link_is_a_cascading_foreign_key():
    assert inspect(CustomerModel).relationships.keys() == []
    assert inspect(InvoiceModel).relationships.keys() == []

    (fk,) = InvoiceModel.__table__.c.customer_id.foreign_keys
    assert fk.target_fullname == "customers.id"
    assert fk.ondelete == "CASCADE"
