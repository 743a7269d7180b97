"""Unit tests for question use cases."""

import pytest

from qna.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from qna.domain.error import NotFoundError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestQuestionUseCases:
    @pytest.mark.asyncio
    async def test_create_then_get(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateQuestionUseCase)
        get = await unit_env.get(GetQuestionUseCase)

        # Act
        created = await create.execute(
            CreateQuestionRequest(title="T", description="D", category="C")
        )
        fetched = await get.execute(GetQuestionRequest(question_id=created.id))

        # Assert
        assert fetched == created

    @pytest.mark.asyncio
    async def test_get_missing_question_raises_not_found(self, unit_env):
        # Arrange
        get = await unit_env.get(GetQuestionUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await get.execute(GetQuestionRequest(question_id=12))

    @pytest.mark.asyncio
    async def test_list_filters_by_category(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateQuestionUseCase)
        list_questions = await unit_env.get(ListQuestionsUseCase)
        await create.execute(
            CreateQuestionRequest(title="A", description="D", category="math")
        )
        await create.execute(
            CreateQuestionRequest(title="B", description="D", category="art")
        )

        # Act
        result = await list_questions.execute(ListQuestionsRequest(category="art"))

        # Assert
        assert [q.title for q in result.questions] == ["B"]

    @pytest.mark.asyncio
    async def test_update_missing_question_raises_not_found(self, unit_env):
        # Arrange
        update = await unit_env.get(UpdateQuestionUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await update.execute(
                UpdateQuestionRequest(
                    question_id=3, title="T", description="D", category="C"
                )
            )

    @pytest.mark.asyncio
    async def test_delete_missing_question_raises_not_found(self, unit_env):
        # Arrange
        delete = await unit_env.get(DeleteQuestionUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await delete.execute(DeleteQuestionRequest(question_id=3))
