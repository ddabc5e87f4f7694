from sqlalchemy.exc import IntegrityError, OperationalError

from alumni_portal.core.exceptions import (
    ConflictError, NotFoundError, UnknownError, ValidationError, normalize_db_error
)


class _PgError(Exception):
    def __init__(self, pgcode):
        super().__init__(f"pg error {pgcode}")
        self.pgcode = pgcode


def _integrity(orig):
    return IntegrityError("INSERT ...", {}, orig)


def test_status_codes():
    assert ValidationError("x").status_code == 400
    assert NotFoundError("x").status_code == 404
    assert ConflictError("x").status_code == 409
    assert UnknownError("x").status_code == 500


def test_postgres_codes_are_normalized():
    assert isinstance(normalize_db_error(_integrity(_PgError("23505")), "User"), ConflictError)
    assert normalize_db_error(_integrity(_PgError("23505")), "User").message == "User already exists!"
    assert isinstance(normalize_db_error(_integrity(_PgError("23503"))), ValidationError)
    assert isinstance(normalize_db_error(_integrity(_PgError("23502"))), ValidationError)


def test_sqlite_messages_are_normalized():
    unique = _integrity(Exception("UNIQUE constraint failed: users.email"))
    fk = _integrity(Exception("FOREIGN KEY constraint failed"))
    assert isinstance(normalize_db_error(unique), ConflictError)
    assert normalize_db_error(fk).message == "Referenced user does not exist"


def test_other_errors_become_unknown():
    error = normalize_db_error(OperationalError("SELECT 1", {}, Exception("connection refused")))
    assert isinstance(error, UnknownError)
    assert error.message == "Internal server error"


def test_unknown_route_uses_error_envelope(client):
    resp = client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert resp.json()["status"] == "error"


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy", "database": "connected"}
