"""Tests for the Database persistence gateway."""

import pytest
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.db.session import Database


class TestConnect:
    def test_connect_succeeds(self, database):
        database.connect()

    def test_unreachable_database_exits(self, tmp_path):
        db = Database(f"sqlite:///{tmp_path}/missing-dir/app.db")
        with pytest.raises(SystemExit):
            db.connect()


class TestInitSchema:
    def test_creates_tables(self, database):
        rows = database.query("SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name")
        names = {row["name"] for row in rows}
        assert {"users", "contact_forms"} <= names

    def test_idempotent(self, database):
        database.init_schema()
        database.init_schema()
        rows = database.query("SELECT count(*) AS n FROM sqlite_master WHERE name = 'users'")
        assert rows[0]["n"] == 1


class TestQuery:
    def test_bound_parameters(self, database):
        database.query(
            "INSERT INTO contact_forms (first_name, last_name, email, phone, message, service_type, created_at, "
            "updated_at) VALUES (:f, :l, :e, :p, :m, 'Other', CURRENT_TIMESTAMP, CURRENT_TIMESTAMP)",
            {"f": "Robert'); DROP TABLE contact_forms;--", "l": "Tables", "e": "bobby@example.com", "p": "1",
             "m": "hello"},
        )
        rows = database.query("SELECT first_name FROM contact_forms WHERE email = :email",
                              {"email": "bobby@example.com"})
        assert rows == [{"first_name": "Robert'); DROP TABLE contact_forms;--"}]

    def test_statement_without_rows(self, database):
        assert database.query("DELETE FROM users WHERE id = :id", {"id": 42}) == []


def test_session_shares_engine():
    db = Database("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    db.init_schema()
    with db.session() as session:
        assert session.get_bind() is db.engine
    db.dispose()


class TestEngineOptions:
    def test_sqlite_has_no_pool_sizing(self):
        options = Database.engine_options(Settings(DATABASE_URL="sqlite://"))
        assert options["connect_args"] == {"check_same_thread": False}
        assert "pool_size" not in options

    def test_postgres_pool_sizing(self):
        options = Database.engine_options(
            Settings(DATABASE_URL="postgresql://u:p@localhost/app", DB_POOL_SIZE=3, DB_MAX_OVERFLOW=7))
        assert options["pool_size"] == 3
        assert options["max_overflow"] == 7
        assert "connect_args" not in options

    def test_neon_requires_tls(self):
        options = Database.engine_options(Settings(DATABASE_URL="postgres://u:p@ep-1.eu.aws.neon.tech/app"))
        assert options["connect_args"] == {"sslmode": "require"}

    def test_explicit_sslmode_in_url_wins(self):
        options = Database.engine_options(
            Settings(DATABASE_URL="postgresql://u:p@ep-1.eu.aws.neon.tech/app?sslmode=verify-full"))
        assert "connect_args" not in options
