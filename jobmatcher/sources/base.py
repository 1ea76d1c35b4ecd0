from abc import ABC, abstractmethod


class SourceAttempt(ABC):
    """One way of retrieving the raw job sheet text.

    ``fetch`` returns the accepted body or raises; the ingestion pipeline
    treats any exception as "try the next source".
    """

    name: str = "source"

    @abstractmethod
    def fetch(self) -> str:
        pass
