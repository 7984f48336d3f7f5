import pytest

from scripts.seed_db import main


@pytest.fixture()
def database_url(db_engine):
    return db_engine.url.render_as_string(hide_password=False)


def test_cli_seeds_and_reports_counts(capsys, count_rows, database_url):
    assert main(["--database-url", database_url, "--rounds", "4", "--workers", "2"]) == 0

    out = capsys.readouterr().out
    assert "users: 1 processed, 1 inserted" in out
    assert "invoices: 13 processed, 13 inserted" in out
    assert "Database seeded successfully" in out
    assert count_rows("customers") == 6


def test_cli_rerun_inserts_nothing(capsys, database_url):
    assert main(["--database-url", database_url, "--rounds", "4"]) == 0
    capsys.readouterr()

    assert main(["--database-url", database_url, "--rounds", "4"]) == 0
    out = capsys.readouterr().out
    assert "revenue: 12 processed, 0 inserted" in out


def test_cli_failure_exits_nonzero(capsys, tmp_path):
    url = f"sqlite:///{tmp_path.as_posix()}/missing-dir/acme.db"
    assert main(["--database-url", url, "--rounds", "4"]) == 1
    assert "step 'connect'" in capsys.readouterr().err
