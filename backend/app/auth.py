from datetime import UTC, datetime, timedelta

import bcrypt
from jose import jwt

ALGORITHM = "HS256"


def hash_password(password: str, rounds: int = 10) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(plain: str, hashed: str) -> bool:
    # bcrypt refuses inputs over 72 bytes; such a password was never stored.
    try:
        return bcrypt.checkpw(plain.encode(), hashed.encode())
    except ValueError:
        return False



def create_access_token(
    user_id: int,
    username: str,
    role: str,
    secret_key: str,
    expire_minutes: int = 60,
) -> str:
    expire = datetime.now(UTC) + timedelta(minutes=expire_minutes)
    return jwt.encode(
        {"id": user_id, "username": username, "role": role, "exp": expire},
        secret_key,
        algorithm=ALGORITHM,
    )


def decode_token(token: str, secret_key: str) -> dict:
    return jwt.decode(token, secret_key, algorithms=[ALGORITHM])
