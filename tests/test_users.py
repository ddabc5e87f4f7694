from sqlalchemy import select

from alumni_portal.api.dependencies import get_user_service
from alumni_portal.core.security import verify_password
from alumni_portal.main import app
from alumni_portal.models import User


def test_create_then_find_one_returns_submitted_fields(client):
    submitted = {
        "firstName": "Asha",
        "lastName": "Rao",
        "email": "asha.rao@example.com",
        "mobile": "9876501234",
        "enrollmentNumber": "ENR2019CS042",
        "branch": "CSE",
        "passingYear": 2023,
        "section": "B",
        "githubProfileUrl": "https://github.com/asha",
        "linkedInProfileUrl": "https://linkedin.com/in/asha",
        "role": "ALUMNI",
    }
    resp = client.post("/api/users", json={**submitted, "password": "secret-password"})
    assert resp.status_code == 201
    created = resp.json()["item"]
    assert created["isApproved"] is False
    assert "password" not in created

    resp = client.get(f"/api/users/{created['userId']}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "success"
    item = body["item"]
    for field, value in submitted.items():
        assert item[field] == value, field
    assert item["userId"] == created["userId"]
    assert "password" not in item
    assert item["professionalInformations"] == []
    assert item["interviewExperiences"] == []
    assert item["societyMemberships"] == []


def test_create_user_message(client):
    resp = client.post("/api/users", json={
        "firstName": "Ravi", "email": "ravi@example.com", "mobile": "9000000001",
        "enrollmentNumber": "E1", "password": "long-enough",
    })
    assert resp.status_code == 201
    assert resp.json()["message"] == "User added successfully"
    assert resp.json()["item"]["role"] == "STUDENT"


def test_password_is_stored_hashed(client, db, make_user):
    item = make_user()
    stored = db.scalars(select(User).where(User.user_id == item["userId"])).one()
    assert stored.password != "secret-password"
    assert verify_password("secret-password", stored.password)


def test_duplicate_user_is_conflict(client, make_user):
    item = make_user(approved=False)
    resp = client.post("/api/users", json={
        "firstName": "Again",
        "email": item["email"],
        "mobile": item["mobile"],
        "enrollmentNumber": item["enrollmentNumber"],
        "password": "another-password",
    })
    assert resp.status_code == 409
    assert resp.json() == {"status": "error", "message": "User already exists!"}


def test_user_differing_in_one_identity_field_is_allowed(client, make_user):
    item = make_user(approved=False)
    resp = client.post("/api/users", json={
        "firstName": "Twin",
        "email": item["email"],
        "mobile": "9111111111",
        "enrollmentNumber": item["enrollmentNumber"],
        "password": "another-password",
    })
    assert resp.status_code == 201


def test_list_shows_only_approved_users(client, make_user):
    approved = make_user()
    make_user(approved=False)

    resp = client.get("/api/users")
    assert resp.status_code == 200
    body = resp.json()
    assert [u["userId"] for u in body["items"]] == [approved["userId"]]
    assert body["meta"] == {"totalItems": 1, "totalPages": 1, "currentPage": 1, "itemsPerPage": 10}


def test_list_pagination(client, make_user):
    for _ in range(12):
        make_user()

    first = client.get("/api/users").json()
    second = client.get("/api/users?page=2").json()
    junk = client.get("/api/users?page=abc").json()

    assert len(first["items"]) == 10
    assert len(second["items"]) == 2
    assert second["meta"]["totalItems"] == 12
    assert second["meta"]["totalPages"] == 2
    assert second["meta"]["currentPage"] == 2
    assert junk["meta"]["currentPage"] == 1
    ids = [u["userId"] for u in first["items"]]
    assert ids == sorted(ids)


def test_list_empty_page(client):
    body = client.get("/api/users?page=3").json()
    assert body["items"] == []
    assert body["meta"]["totalItems"] == 0
    assert body["meta"]["totalPages"] == 0


def test_role_filter(client, make_user):
    alumnus = make_user(role="ALUMNI")
    student = make_user(role="STUDENT")

    alumni = client.get("/api/users?role=ALUMNI").json()["items"]
    students = client.get("/api/users?role=STUDENT").json()["items"]
    assert [u["userId"] for u in alumni] == [alumnus["userId"]]
    assert [u["userId"] for u in students] == [student["userId"]]

    resp = client.get("/api/users?role=TEACHER")
    assert resp.status_code == 400
    assert resp.json()["status"] == "error"


def test_update_user_partial(client, make_user):
    item = make_user()
    resp = client.put(f"/api/users/{item['userId']}", json={"branch": "ECE"})
    assert resp.status_code == 200
    updated = resp.json()["item"]
    assert updated["branch"] == "ECE"
    assert updated["firstName"] == item["firstName"]
    assert resp.json()["message"] == "User updated successfully"


def test_update_user_rehashes_password(client, db, make_user):
    item = make_user()
    client.put(f"/api/users/{item['userId']}", json={"password": "brand-new-password"})
    stored = db.scalars(select(User).where(User.user_id == item["userId"])).one()
    assert verify_password("brand-new-password", stored.password)


def test_update_with_empty_body_is_rejected(client, make_user):
    item = make_user()
    resp = client.put(f"/api/users/{item['userId']}", json={})
    assert resp.status_code == 400
    assert resp.json()["message"] == "No fields to update"


def test_update_missing_user_is_not_found(client):
    resp = client.put("/api/users/999", json={"branch": "ECE"})
    assert resp.status_code == 404
    assert resp.json() == {"status": "error", "message": "User not found"}


def test_delete_user(client, make_user):
    item = make_user()
    resp = client.delete(f"/api/users/{item['userId']}")
    assert resp.status_code == 200
    assert resp.json()["item"]["userId"] == item["userId"]

    assert client.get(f"/api/users/{item['userId']}").status_code == 404
    assert client.delete(f"/api/users/{item['userId']}").status_code == 404


def test_delete_user_cascades_to_children(client, make_user):
    item = make_user()
    info = client.post("/api/professional-information", json={
        "userId": item["userId"], "companyName": "Acme", "role": "SDE", "startDate": "2022-07-01",
    }).json()["item"]

    client.delete(f"/api/users/{item['userId']}")
    resp = client.get(f"/api/professional-information/{info['professionalInformationId']}")
    assert resp.status_code == 404


def test_max_id_is_accepted_and_overflow_rejected(client):
    assert client.get("/api/users/9223372036854775807").status_code == 404
    resp = client.get("/api/users/9223372036854775808")
    assert resp.status_code == 400
    assert resp.json()["status"] == "error"


class _UntouchableService:
    def __getattr__(self, name):
        raise AssertionError(f"service.{name} must not be called")


def test_invalid_id_fails_before_service_call(client):
    app.dependency_overrides[get_user_service] = _UntouchableService
    try:
        for method in ("GET", "DELETE"):
            resp = client.request(method, "/api/users/abc")
            assert resp.status_code == 400
            assert resp.json() == {"status": "error", "message": "Invalid id"}
        resp = client.put("/api/users/-5", json={"branch": "ECE"})
        assert resp.status_code == 400
    finally:
        del app.dependency_overrides[get_user_service]


def test_invalid_body_uses_error_envelope(client):
    resp = client.post("/api/users", json={"firstName": "NoEmail", "password": "x"})
    assert resp.status_code == 400
    body = resp.json()
    assert body["status"] == "error"
    assert body["message"]


def test_overlong_password_is_rejected(client, make_user):
    resp = client.post("/api/users", json={
        "firstName": "Long", "email": "long@example.com", "mobile": "9000000002",
        "enrollmentNumber": "E2", "password": "a" * 5000,
    })
    assert resp.status_code == 400
    assert resp.json()["status"] == "error"

    item = make_user()
    resp = client.put(f"/api/users/{item['userId']}", json={"password": "a" * 73})
    assert resp.status_code == 400


def test_error_responses_are_documented(client):
    schema = client.get("/openapi.json").json()
    assert "ErrorEnvelope" in schema["components"]["schemas"]
    responses = schema["paths"]["/api/users/{id}"]["get"]["responses"]
    assert responses["404"]["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorEnvelope")
