from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Commit or roll back everything a use case wrote as one transaction"""

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc, tb):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
