from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from packages.jp_service.concurrency import ReadWriteLock
from .models import JobPost

class JobPostRepository(ABC):
    """
    Interface for the Job Post registry.
    Absence is reported through the return value (None / False), never raised.
    """
    @abstractmethod
    def list_all(self) -> List[JobPost]:
        """All records in insertion order."""
        pass

    @abstractmethod
    def get_by_id(self, post_id: int) -> Optional[JobPost]:
        """First record whose post_id matches, or None."""
        pass

    @abstractmethod
    def add(self, job: JobPost) -> None:
        """Append a record. Duplicate post_ids are allowed."""
        pass

    @abstractmethod
    def update(self, job: JobPost) -> Optional[JobPost]:
        """Overwrite the first matching record (except post_id). None if no match."""
        pass

    @abstractmethod
    def delete_by_id(self, post_id: int) -> bool:
        """Remove the first matching record. False if no match."""
        pass

    @abstractmethod
    def count(self) -> int:
        pass

class MemoryJobPostRepository(JobPostRepository):
    """
    In-Memory implementation of JobPostRepository.
    Ordered list guarded by a ReadWriteLock; contents are lost on restart.
    Records handed in or out are copies so callers never touch shared state.
    """
    def __init__(self, initial: Optional[Iterable[JobPost]] = None):
        self._jobs: list[JobPost] = [j.model_copy(deep=True) for j in (initial or [])]
        self._lock = ReadWriteLock()

    def list_all(self) -> List[JobPost]:
        with self._lock.read_locked():
            return [j.model_copy(deep=True) for j in self._jobs]

    def get_by_id(self, post_id: int) -> Optional[JobPost]:
        with self._lock.read_locked():
            index = self._index_of(post_id)
            if index is None:
                return None
            return self._jobs[index].model_copy(deep=True)

    def add(self, job: JobPost) -> None:
        with self._lock.write_locked():
            self._jobs.append(job.model_copy(deep=True))

    def update(self, job: JobPost) -> Optional[JobPost]:
        with self._lock.write_locked():
            index = self._index_of(job.post_id)
            if index is None:
                return None
            target = self._jobs[index]
            target.apply_update(job)
            return target.model_copy(deep=True)

    def delete_by_id(self, post_id: int) -> bool:
        with self._lock.write_locked():
            index = self._index_of(post_id)
            if index is None:
                return False
            del self._jobs[index]
            return True

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._jobs)

    def _index_of(self, post_id: int) -> Optional[int]:
        # Caller must hold the lock.
        for i, job in enumerate(self._jobs):
            if job.post_id == post_id:
                return i
        return None
