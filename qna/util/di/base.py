"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests can swap for mocks
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Common base of every provider in PROVIDERS.

    Attributes:
        __mock_component__: Set on a mockable component base, None otherwise
        __is_mock__: True on the test implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
