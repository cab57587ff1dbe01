"""Tests for bcrypt password hashing."""

import pytest

from dashboard_api.services.password_hasher import PasswordHasher


class TestPasswordHasher:

    def test_hash_is_not_plaintext_and_verifies(self) -> None:
        hasher = PasswordHasher(rounds=4)
        hashed = hasher.hash("123456")
        assert hashed != "123456"
        assert PasswordHasher.verify("123456", hashed)
        assert not PasswordHasher.verify("654321", hashed)

    def test_cost_factor_is_encoded_in_hash(self) -> None:
        assert PasswordHasher(rounds=5).hash("pw").startswith("$2b$05$")

    def test_salts_differ_between_calls(self) -> None:
        hasher = PasswordHasher(rounds=4)
        assert hasher.hash("same") != hasher.hash("same")

    def test_verify_rejects_non_bcrypt_value(self) -> None:
        assert PasswordHasher.verify("123456", "123456") is False

    @pytest.mark.asyncio
    async def test_hash_many_preserves_order(self) -> None:
        hasher = PasswordHasher(rounds=4)
        passwords = ["alpha", "beta", "gamma"]
        hashed = await hasher.hash_many(passwords)
        assert len(hashed) == 3
        for plain, digest in zip(passwords, hashed):
            assert PasswordHasher.verify(plain, digest)
