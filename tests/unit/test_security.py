"""Tests for password hashing and OTP generation."""

from app.core.security import (
    DUMMY_HASH,
    OTP_LENGTH,
    generate_otp_code,
    hash_password,
    verify_password,
)


class TestPasswordHashing:
    """Tests for bcrypt password operations."""

    async def test_hash_and_verify(self) -> None:
        hashed = await hash_password("MyPassword123!")
        assert await verify_password("MyPassword123!", hashed) is True

    async def test_hash_never_equals_plaintext(self) -> None:
        hashed = await hash_password("secret123")
        assert hashed != "secret123"
        assert hashed.startswith("$2")

    async def test_same_password_gets_fresh_salt(self) -> None:
        assert await hash_password("secret123") != await hash_password("secret123")

    async def test_wrong_password_fails(self) -> None:
        hashed = await hash_password("Correct1!")
        assert await verify_password("Wrong1!", hashed) is False

    async def test_dummy_hash_does_not_match_real(self) -> None:
        assert await verify_password("realpassword", DUMMY_HASH) is False


class TestGenerateOTPCode:
    """Tests for one-time code generation."""

    def test_six_digits(self) -> None:
        for _ in range(200):
            code = generate_otp_code()
            assert len(code) == OTP_LENGTH
            assert code.isdigit()
            assert code[0] != "0"

    def test_codes_vary(self) -> None:
        assert len({generate_otp_code() for _ in range(50)}) > 1
