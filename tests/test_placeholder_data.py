from acme.placeholder_data import CUSTOMERS, INVOICES, REVENUE, USERS, load_placeholder_dataset


def test_placeholder_dataset_validates():
    dataset = load_placeholder_dataset()

    assert len(dataset.users) == len(USERS)
    assert len(dataset.customers) == len(CUSTOMERS)
    assert len(dataset.invoices) == len(INVOICES)
    assert len(dataset.revenue) == len(REVENUE)


def test_placeholder_keys_are_unique_and_invoices_reference_customers():
    dataset = load_placeholder_dataset()
    customer_ids = {c.id for c in dataset.customers}

    assert len({u.email for u in dataset.users}) == len(dataset.users)
    assert len(customer_ids) == len(dataset.customers)
    assert len({i.id for i in dataset.invoices}) == len(dataset.invoices)
    assert len({r.month for r in dataset.revenue}) == len(dataset.revenue)
    assert all(i.customer_id in customer_ids for i in dataset.invoices)


def test_load_returns_independent_copies():
    first = load_placeholder_dataset()
    first.users[0].name = "changed"
    assert load_placeholder_dataset().users[0].name == USERS[0]["name"]
