import bcrypt

from src.app.services.password_hasher import IPasswordHasher, MAX_PASSWORD_BYTES


class BcryptPasswordHasher(IPasswordHasher):
    """
    bcrypt implementation of IPasswordHasher

    Input is cut to MAX_PASSWORD_BYTES before hashing and checking, since
    bcrypt>=5 raises on longer input instead of ignoring the tail.
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    @staticmethod
    def _encode(plaintext: str) -> bytes:
        return plaintext.encode("utf-8")[:MAX_PASSWORD_BYTES]

    def hash(self, plaintext: str) -> str:
        password_hash = bcrypt.hashpw(self._encode(plaintext), bcrypt.gensalt(self.rounds))
        return password_hash.decode("utf-8")

    def matches(self, plaintext: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(self._encode(plaintext), hashed.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
