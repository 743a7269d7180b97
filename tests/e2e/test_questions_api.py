"""End-to-end tests for question and answer endpoints."""

import pytest
from fastapi.testclient import TestClient

from qna.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory repositories."""
    return TestClient(create_app(build_test_container()))


def _create_question(client: TestClient, title: str = "T", category: str = "C") -> dict:
    response = client.post(
        "/questions",
        json={"title": title, "description": "D", "category": category},
    )
    assert response.status_code == 201
    return response.json()["newQuestion"]


class TestQuestionEndpoints:
    """CRUD endpoints for questions."""

    def test_create_question(self, client):
        # Act
        response = client.post(
            "/questions",
            json={"title": "Title", "description": "Body", "category": "general"},
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Question created successfully."
        assert body["newQuestion"]["id"] == 1
        assert body["newQuestion"]["title"] == "Title"
        assert "upvote" not in body["newQuestion"]

    @pytest.mark.parametrize(
        "payload",
        [
            {"description": "D", "category": "C"},
            {"title": "", "description": "D", "category": "C"},
            None,
        ],
    )
    def test_create_question_missing_field_returns_400(self, client, payload):
        # Act
        response = client.post("/questions", json=payload)

        # Assert
        assert response.status_code == 400
        assert response.json() == {"message": "Missing or invalid request data."}

    def test_list_questions_filters(self, client):
        # Arrange
        _create_question(client, title="A", category="math")
        _create_question(client, title="B", category="math")
        _create_question(client, title="A", category="art")

        # Act
        all_questions = client.get("/questions")
        filtered = client.get("/questions", params={"title": "A", "category": "math"})

        # Assert
        assert all_questions.status_code == 200
        assert len(all_questions.json()["data"]) == 3
        message = filtered.json()["message"]
        assert message == "Successfully retrieved the list of questions."
        assert [(q["title"], q["category"]) for q in filtered.json()["data"]] == [
            ("A", "math")
        ]

    def test_list_questions_without_match_returns_404(self, client):
        # Act
        response = client.get("/questions", params={"category": "nothing"})

        # Assert
        assert response.status_code == 404
        assert response.json() == {"message": "Question not found."}

    def test_list_questions_with_unknown_param_returns_400(self, client):
        # Arrange
        _create_question(client)

        # Act
        response = client.get("/questions", params={"author": "bob"})

        # Assert
        assert response.status_code == 400
        assert response.json() == {"message": "Please enter a correct query."}

    def test_get_question(self, client):
        # Arrange
        question = _create_question(client)

        # Act
        response = client.get(f"/questions/{question['id']}")

        # Assert
        assert response.status_code == 200
        assert response.json()["message"] == (
            "Successfully retrieved the list of questions."
        )
        assert response.json()["data"] == question

    def test_get_missing_question_returns_404(self, client):
        # Act
        response = client.get("/questions/42")

        # Assert
        assert response.status_code == 404
        assert response.json() == {"message": "Question not found."}

    def test_update_question(self, client):
        # Arrange
        question = _create_question(client)

        # Act
        response = client.put(
            f"/questions/{question['id']}",
            json={"title": "New", "description": "New body", "category": "new"},
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Successfully updated the question."
        assert body["updatedQuestion"]["id"] == question["id"]
        assert body["updatedQuestion"]["title"] == "New"

    def test_update_missing_question_returns_404(self, client):
        # Act
        response = client.put(
            "/questions/42", json={"title": "T", "description": "D", "category": "C"}
        )

        # Assert
        assert response.status_code == 404

    def test_delete_question_removes_answers(self, client):
        # Arrange
        question = _create_question(client)
        client.post(f"/questions/{question['id']}/answers", json={"content": "A"})

        # Act
        response = client.delete(f"/questions/{question['id']}")

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "message": "Successfully deleted the question and answer."
        }
        assert client.get(f"/questions/{question['id']}").status_code == 404
        answers = client.get(f"/questions/{question['id']}/answers")
        assert answers.json()["data"] == []

    def test_delete_missing_question_returns_404(self, client):
        # Act
        response = client.delete("/questions/42")

        # Assert
        assert response.status_code == 404


class TestAnswerEndpoints:
    """Answer sub-resource of questions."""

    def test_answer_of_exactly_300_characters_is_accepted(self, client):
        # Arrange
        question = _create_question(client)

        # Act
        response = client.post(
            f"/questions/{question['id']}/answers", json={"content": "a" * 300}
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Answer created successfully."
        assert body["answer"]["question_id"] == question["id"]

    def test_answer_of_301_characters_is_rejected(self, client):
        # Arrange
        question = _create_question(client)

        # Act
        response = client.post(
            f"/questions/{question['id']}/answers", json={"content": "a" * 301}
        )

        # Assert
        assert response.status_code == 400
        assert response.json() == {"message": "Textlength is over 300."}

    def test_answer_on_missing_question_returns_404(self, client):
        # Act
        response = client.post("/questions/42/answers", json={"content": "Hi"})

        # Assert
        assert response.status_code == 404
        assert response.json() == {"message": "Question not found."}

    def test_list_answers(self, client):
        # Arrange
        question = _create_question(client)
        client.post(f"/questions/{question['id']}/answers", json={"content": "one"})
        client.post(f"/questions/{question['id']}/answers", json={"content": "two"})

        # Act
        response = client.get(f"/questions/{question['id']}/answers")

        # Assert
        assert response.status_code == 200
        assert response.json()["message"] == "Successfully retrieved the answers."
        assert [a["content"] for a in response.json()["data"]] == ["one", "two"]


class TestHealth:
    def test_health_check(self, client):
        # Act
        response = client.get("/health")

        # Assert
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
