from passlib.context import CryptContext

from medportal.config.settings import settings

# Hashes use the "$2b$" bcrypt identifier
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__ident="2b",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def configure_password_hashing(rounds: int) -> None:
    """Set the bcrypt cost for new hashes. Existing hashes still verify."""
    pwd_context.update(bcrypt__rounds=rounds)
