from acme.helpers.openapi import augment_openapi
from acme.main import app


def test_openapi_documents_seed_examples():
    spec = augment_openapi(app.openapi())

    get_seed = spec["paths"]["/seed"]["get"]
    ok = get_seed["responses"]["200"]["content"]["application/json"]["examples"]
    err = get_seed["responses"]["500"]["content"]["application/json"]["examples"]

    assert ok["seeded"]["value"] == {"message": "Database seeded successfully"}
    assert set(err["invoices_without_customer"]["value"]) == {"error"}


def test_augment_openapi_ignores_missing_route():
    spec = augment_openapi({"paths": {}})
    assert spec == {"paths": {}}
