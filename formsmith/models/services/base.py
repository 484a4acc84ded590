from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List

from formsmith.pipeline.generation.types import Identity, QuestionRow


class ServiceError(RuntimeError): ...
class AuthError(ServiceError): ...
class StoreError(ServiceError): ...


class AuthService(ABC):
    @abstractmethod
    def verify_identity(self, credential: str) -> Identity:
        """Exchange a bearer credential for a verified identity, or raise AuthError."""
        raise NotImplementedError


class FormStore(ABC):
    def bind(self, credential: str) -> FormStore:
        """Store acting on behalf of the credential's owner. Stores without per-user access return themselves."""
        return self

    @abstractmethod
    def insert_form(self, title: str, owner_id: str) -> str:
        """Insert one form row and return its generated id, or raise StoreError."""
        raise NotImplementedError

    @abstractmethod
    def insert_questions(self, rows: List[QuestionRow]) -> None:
        """Insert all question rows in one write, or raise StoreError."""
        raise NotImplementedError
