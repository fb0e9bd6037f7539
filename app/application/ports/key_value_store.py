from abc import ABC, abstractmethod


class KeyValueStorePort(ABC):
    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """
        Return the string stored under key, or None when nothing was written.
        Adapters may raise OSError when the underlying medium is unreadable.
        """
        raise NotImplementedError

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError
