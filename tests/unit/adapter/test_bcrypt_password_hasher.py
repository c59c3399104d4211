from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher


def test_hash_is_not_plaintext_and_matches():
    hasher = BcryptPasswordHasher(rounds=4)

    hashed = hasher.hash("secret1")

    assert hashed != "secret1"
    assert len(hashed) == 60
    assert hasher.matches("secret1", hashed)
    assert not hasher.matches("secret2", hashed)


def test_same_password_hashes_differently():
    hasher = BcryptPasswordHasher(rounds=4)

    assert hasher.hash("secret1") != hasher.hash("secret1")


def test_garbage_stored_hash_does_not_match():
    hasher = BcryptPasswordHasher(rounds=4)

    assert not hasher.matches("secret1", "not-a-bcrypt-hash")


def test_long_password_does_not_raise():
    """Input past 72 bytes is cut, not rejected"""
    hasher = BcryptPasswordHasher(rounds=4)
    long_password = "a" * 80

    hashed = hasher.hash(long_password)

    assert hasher.matches(long_password, hashed)
    assert hasher.matches("a" * 72, hashed)
    assert not hasher.matches("a" * 71, hashed)
