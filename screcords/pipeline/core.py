from abc import ABC, abstractmethod
from typing import Any, Iterable


class Source(ABC):
    @abstractmethod
    def read(self) -> Iterable[Any]:
        """
        Reads data from the external system (the configuration store).
        Returns the raw items to be processed.
        """
        pass


class Transform(ABC):
    @abstractmethod
    def process(self, *args, **kwargs) -> Any:
        """
        Processes data. Input/Output depends on the specific transform step.
        """
        pass


class Sink(ABC):
    @abstractmethod
    def write(self, item: Any) -> None:
        """
        Accepts a single item and hands it to the destination.
        """
        pass

    @abstractmethod
    def flush(self) -> None:
        """
        Forces pending output to be written to the destination.
        """
        pass
