import bcrypt

# bcrypt only looks at (and newer releases refuse more than) the first 72 bytes
MAX_PASSWORD_BYTES = 72


def password_too_long(plaintext: str) -> bool:
    return len(plaintext.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(plaintext: str, rounds: int = 10) -> str:
    if password_too_long(plaintext):
        raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
    return bcrypt.hashpw(plaintext.encode("utf-8"), bcrypt.gensalt(rounds)).decode("utf-8")


def verify_password(plaintext: str, digest: str) -> bool:
    if not digest or password_too_long(plaintext):
        return False
    return bcrypt.checkpw(plaintext.encode("utf-8"), digest.encode("utf-8"))
