from abc import ABC, abstractmethod

# bcrypt only reads the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


class IPasswordHasher(ABC):
    """One-way credential hashing - application layer"""

    @abstractmethod
    def hash(self, plaintext: str) -> str:
        """Derive an opaque hash from a plain text password"""
        pass

    @abstractmethod
    def matches(self, plaintext: str, hashed: str) -> bool:
        """Check a plain text password against a stored hash"""
        pass
