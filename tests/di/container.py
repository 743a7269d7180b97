"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from qna.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where mockable components default to their mocks.

    Args:
        unmock: Components to run with production implementations

    Returns:
        Container usable directly or behind a FastAPI TestClient

    Raises:
        ValueError: If ``unmock`` names an unknown component

    Examples:
        # In-memory repositories
        container = build_test_container()

        # Real PostgreSQL at DATABASE__URL
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()

    mockable = {p.__mock_component__ for p in PROVIDERS if p.__mock_component__}
    unknown = unmock - mockable
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(
            base,
            use_mock=base.__mock_component__ is not None
            and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())
