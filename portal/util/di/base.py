"""Provider base class."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a mock implementation under tests/di
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Dishka provider tagged for mock selection.

    Attributes:
        __mock_component__: Set on the base of a mockable component
        __is_mock__: True on the test implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
