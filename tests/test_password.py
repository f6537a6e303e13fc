"""Tests for bcrypt password hashing."""

from auth.password import hash_password, verify_password


class TestPasswordHashing:
    def test_same_password_hashes_differently_but_both_verify(self):
        first = hash_password("secret123", rounds=4)
        second = hash_password("secret123", rounds=4)

        assert first != second
        assert verify_password("secret123", first)
        assert verify_password("secret123", second)

    def test_plaintext_is_not_stored(self):
        assert "secret123" not in hash_password("secret123", rounds=4)

    def test_wrong_password_is_false_not_error(self):
        digest = hash_password("secret123", rounds=4)
        assert verify_password("secret124", digest) is False

    def test_malformed_digest_is_false(self):
        assert verify_password("secret123", "not-a-bcrypt-hash") is False
