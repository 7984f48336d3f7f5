"""Write the augmented OpenAPI document for the seeding service.

Usage:
    python scripts/generate_openapi.py [--output docs/openapi.json]
"""
from __future__ import annotations

import argparse
import json
import os

from acme.helpers.openapi import augment_openapi
from acme.main import app

DEFAULT_OUTPUT = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "docs", "openapi.json")


def write_openapi(out: str) -> str:
    augmented = augment_openapi(app.openapi())
    os.makedirs(os.path.dirname(out) or ".", exist_ok=True)
    with open(out, "w", encoding="utf-8") as f:
        json.dump(augmented, f, indent=2, ensure_ascii=False, sort_keys=True)
    return out


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="Destination file (default: docs/openapi.json)")
    args = parser.parse_args(argv)
    print(f"Wrote OpenAPI to {write_openapi(args.output)}")


if __name__ == "__main__":
    main()
