"""Password hashing and one-time code helpers."""

import asyncio
import secrets
from concurrent.futures import ThreadPoolExecutor

import bcrypt

BCRYPT_ROUNDS = 12
OTP_LENGTH = 6

_executor = ThreadPoolExecutor(max_workers=4)

DUMMY_HASH = bcrypt.hashpw(b"dummy", bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode()


async def hash_password(password: str) -> str:
    """Hash a password with a fresh bcrypt salt off the event loop."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        _executor,
        lambda: bcrypt.hashpw(
            password.encode(), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
        ).decode(),
    )


async def verify_password(plain: str, hashed: str) -> bool:
    """Verify a password against a bcrypt hash."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        _executor,
        lambda: bcrypt.checkpw(plain.encode(), hashed.encode()),
    )


def generate_otp_code(length: int = OTP_LENGTH) -> str:
    """Return a random numeric code without a leading zero, e.g. ``"482913"``."""
    low = 10 ** (length - 1)
    return str(low + secrets.randbelow(9 * low))
