import pytest

pytestmark = pytest.mark.django_db


class TestUnauthenticated:
    @pytest.mark.parametrize(
        "method,path",
        [
            ("get", "/api/v1/exam/{id}/"),
            ("post", "/api/v1/exam/{id}/submit/"),
            ("get", "/api/v1/exam/{id}/my-result/"),
            ("get", "/api/v1/exam/{id}/results/"),
            ("patch", "/api/v1/exam/{id}/publish/"),
            ("post", "/api/v1/exam/"),
        ],
    )
    def test_401_with_structured_body(self, api_client, exam, method, path):
        res = getattr(api_client, method)(path.format(id=exam.id), {}, format="json")
        assert res.status_code == 401
        assert res.json() == {"status": 401, "message": "Authentication required"}
        assert res["WWW-Authenticate"].startswith("Bearer")


class TestRoleDenied:
    def test_student_cannot_list_results(self, as_user, student, exam):
        res = as_user(student).get(f"/api/v1/exam/{exam.id}/results/")
        assert res.status_code == 403
        assert res.json() == {
            "status": 403,
            "message": "Access denied. Teacher or Admin privileges required.",
        }

    def test_student_cannot_publish(self, as_user, student, exam):
        res = as_user(student).patch(
            f"/api/v1/exam/{exam.id}/publish/", {"isPublished": False}, format="json"
        )
        assert res.status_code == 403
        assert res.json()["message"] == "Access denied. Staff privileges required."

    def test_admin_cannot_give_feedback(self, as_user, admin_user, exam):
        res = as_user(admin_user).patch(
            f"/api/v1/exam/{exam.id}/results/1/feedback/", {"feedback": "ok"}, format="json"
        )
        assert res.status_code == 403
        assert res.json()["message"] == "Access denied. Teacher privileges required."

    def test_denied_handler_never_runs(self, as_user, student, exam):
        as_user(student).patch(f"/api/v1/exam/{exam.id}/publish/", {"isPublished": False}, format="json")
        exam.refresh_from_db()
        assert exam.is_published is True


class TestJwt:
    def test_token_carries_role_and_authenticates(self, api_client, teacher):
        res = api_client.post(
            "/api/v1/token/",
            {"username": teacher.username, "password": "pw-12345"},
            format="json",
        )
        assert res.status_code == 200
        assert res.json()["role"] == "teacher"

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {res.json()['access']}")
        me = api_client.get("/api/v1/core/me/")
        assert me.status_code == 200
        assert me.json()["role"] == "teacher"
        assert me.json()["username"] == teacher.username


class TestHealth:
    def test_health(self, client, db):
        res = client.get("/health/")
        assert res.status_code == 200
        assert res.json()["status"] == "healthy"
