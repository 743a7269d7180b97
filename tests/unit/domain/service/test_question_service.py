"""Unit tests for QuestionService."""

import pytest

from qna.domain.repository import AnswerRepository
from qna.domain.service import AnswerService, QuestionService
from qna.domain.value import QuestionId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateQuestion:
    @pytest.mark.asyncio
    async def test_create_question_assigns_id_and_timestamps(self, unit_env):
        """Saved questions should get a storage-assigned ID."""
        # Arrange
        service = await unit_env.get(QuestionService)

        # Act
        question = await service.create_question("Title", "Description", "general")

        # Assert
        assert question.id == 1
        assert question.title == "Title"
        assert question.created_at == question.updated_at


class TestListQuestions:
    """Tests for list_questions filtering."""

    @pytest.mark.asyncio
    async def test_list_without_filters_returns_all(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)
        await service.create_question("A", "D", "math")
        await service.create_question("B", "D", "physics")

        # Act
        questions = await service.list_questions()

        # Assert
        assert [q.title for q in questions] == ["A", "B"]

    @pytest.mark.asyncio
    async def test_filters_match_exactly_and_combine(self, unit_env):
        """Title and category filters are exact matches and both apply."""
        # Arrange
        service = await unit_env.get(QuestionService)
        await service.create_question("A", "D", "math")
        await service.create_question("A", "D", "physics")
        await service.create_question("AB", "D", "math")

        # Act
        by_title = await service.list_questions(title="A")
        by_both = await service.list_questions(title="A", category="math")

        # Assert
        assert len(by_title) == 2
        assert len(by_both) == 1
        assert by_both[0].category == "math"

    @pytest.mark.asyncio
    async def test_empty_filter_matches_everything(self, unit_env):
        """An empty string filter is treated as no filter."""
        # Arrange
        service = await unit_env.get(QuestionService)
        await service.create_question("A", "D", "math")

        # Act
        questions = await service.list_questions(title="", category="")

        # Assert
        assert len(questions) == 1


class TestUpdateQuestion:
    @pytest.mark.asyncio
    async def test_update_replaces_fields_and_bumps_updated_at(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)
        original = await service.create_question("Old", "Old body", "math")

        # Act
        updated = await service.update_question(original.id, "New", "New body", "art")

        # Assert
        assert updated.id == original.id
        assert (updated.title, updated.description, updated.category) == (
            "New",
            "New body",
            "art",
        )
        assert updated.created_at == original.created_at
        assert updated.updated_at >= original.updated_at

    @pytest.mark.asyncio
    async def test_update_missing_question_returns_none(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)

        # Act
        result = await service.update_question(QuestionId(5), "T", "D", "C")

        # Assert
        assert result is None


class TestDeleteQuestion:
    @pytest.mark.asyncio
    async def test_delete_removes_question_and_its_answers(self, unit_env):
        """Deleting a question should cascade to its answers."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_service.create_question("Q", "D", "general")
        answer = await answer_service.create_answer(question.id, "A")

        # Act
        deleted = await question_service.delete_question(question.id)

        # Assert
        assert deleted is True
        assert await question_service.get_question_by_id(question.id) is None
        assert await answer_repo.find_by_id(answer.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_question_returns_false(self, unit_env):
        # Arrange
        service = await unit_env.get(QuestionService)

        # Act & Assert
        assert await service.delete_question(QuestionId(77)) is False
