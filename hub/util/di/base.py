"""Provider metadata shared by production and test wiring."""

from typing import ClassVar, Literal, get_args

from dishka import Provider

# Infrastructure that tests swap for in-process fakes
Component = Literal["email", "persistence"]
COMPONENTS: frozenset[Component] = frozenset(get_args(Component))


class ProviderBase(Provider):
    """Provider tagged with the component it implements.

    Concrete providers (config, domain services, use cases) leave
    ``__mock_component__`` unset. A swappable component is a base class naming
    the component, subclassed once for production and once, under tests/di,
    with ``__is_mock__ = True``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_swappable(cls) -> bool:
        return cls.__mock_component__ is not None
