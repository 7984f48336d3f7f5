"""OpenAPI augmentation helpers."""
from __future__ import annotations

from typing import Any, Dict


def augment_openapi(spec: Dict[str, Any]) -> Dict[str, Any]:
    """Return `spec` augmented with response examples for `GET /seed`.

    Adds:
    - the success body
    - an error body for a failed seed (500)
    """
    s = spec

    paths = s.setdefault("paths", {})
    get_seed = paths.get("/seed", {}).get("get")

    if get_seed is not None:
        responses = get_seed.setdefault("responses", {})

        resp_200 = responses.setdefault("200", {})
        ok_json = resp_200.setdefault("content", {}).setdefault("application/json", {})
        ok_json.setdefault("examples", {})["seeded"] = {
            "summary": "Tables created and dataset inserted (or already present)",
            "value": {"message": "Database seeded successfully"},
        }

        resp_500 = responses.setdefault("500", {})
        err_json = resp_500.setdefault("content", {}).setdefault("application/json", {})
        err_json.setdefault("examples", {})["invoices_without_customer"] = {
            "summary": "Invoice references a customer that does not exist",
            "value": {
                "error": 'insert or update on table "invoices" violates foreign key constraint "invoices_customer_id_fkey"'
            },
        }

    return s
