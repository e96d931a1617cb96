"""Password hashing (PBKDF2-SHA256)."""
import hashlib
import hmac
import secrets

ALGORITHM = "pbkdf2_sha256"
ITERATIONS = 260_000


def hash_password(password: str, salt: str | None = None, iterations: int = ITERATIONS) -> str:
    """Return an encoded hash: algorithm$iterations$salt$hexdigest."""
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), iterations)
    return f"{ALGORITHM}${iterations}${salt}${digest.hex()}"


def verify_password(password: str, encoded: str | None) -> bool:
    """Check a password against an encoded hash (constant-time compare)."""
    if not encoded:
        return False
    try:
        algorithm, iterations, salt, _ = encoded.split("$", 3)
    except ValueError:
        return False
    if algorithm != ALGORITHM or not iterations.isdigit():
        return False
    expected = hash_password(password, salt=salt, iterations=int(iterations))
    return hmac.compare_digest(expected, encoded)
