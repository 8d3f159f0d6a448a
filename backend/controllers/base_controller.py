import inspect
from abc import ABC, abstractmethod
from collections.abc import Callable

from pydantic import TypeAdapter, ValidationError


class UnknownEvent(LookupError):
    pass


class InvalidPayload(ValueError):
    pass


class BaseController(ABC):
    name: str = "base"

    def __init__(self):
        self.handlers: dict[str, Callable] = self.register()

    @abstractmethod
    def register(self) -> dict[str, Callable]:
        """Event name -> handler table for this component."""
        raise NotImplementedError

    def _bind(self, event: str, handler: Callable, payload: dict) -> inspect.BoundArguments:
        """Match the payload to the handler's parameters and validate each against its annotation."""
        signature = inspect.signature(handler)
        try:
            bound = signature.bind(**payload)
        except TypeError as e:
            raise InvalidPayload(f"{self.name}.{event}: {e}") from e

        for name, value in bound.arguments.items():
            annotation = signature.parameters[name].annotation
            if annotation is inspect.Parameter.empty:
                continue
            try:
                bound.arguments[name] = TypeAdapter(annotation).validate_python(value)
            except ValidationError as e:
                raise InvalidPayload(f"{self.name}.{event}: invalid {name!r}: {e.errors()[0]['msg']}") from e
        return bound

    async def dispatch(self, event: str, payload: dict | None = None):
        handler = self.handlers.get(event)
        if handler is None:
            raise UnknownEvent(f"{self.name} has no handler for {event!r}")

        bound = self._bind(event, handler, payload or {})
        result = handler(*bound.args, **bound.kwargs)
        if inspect.isawaitable(result):
            result = await result
        return result
