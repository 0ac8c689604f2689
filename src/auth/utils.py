# Authentication and JWT Utilities

from passlib.context import CryptContext
from datetime import timedelta, datetime, timezone
from src.errors import Unauthorized
from src.config import Config
import jwt  # JSON Web Token implementation
import uuid
import logging

logger = logging.getLogger(__name__)

# Password hashing configuration using bcrypt
passwd_context = CryptContext(
    schemes=["bcrypt"]
)

# Token expiry time in seconds
ACCESS_TOKEN_EXPIRY = Config.ACCESS_TOKEN_EXPIRY_DAYS * 24 * 60 * 60


def generate_passwd_hash(password: str) -> str:
    hash = passwd_context.hash(password)

    return hash

def verify_password(password: str, hash: str) -> bool:
    return passwd_context.verify(password, hash)

def create_access_token(user_data: dict, expiry: timedelta = None) -> str:
    """Create a JWT access token for authentication.

    Args:
        user_data (dict): User information to encode in the token
        expiry (timedelta, optional): Custom expiration time. Defaults to ACCESS_TOKEN_EXPIRY

    Returns:
        str: Encoded JWT token
    """
    payload = {
        'user': user_data,
        'exp': datetime.now(timezone.utc) + (expiry if expiry is not None else timedelta(seconds=ACCESS_TOKEN_EXPIRY)),
        'jti': str(uuid.uuid4()),
    }

    token = jwt.encode(
        payload = payload,
        key = Config.JWT_SECRET,
        algorithm = Config.JWT_ALGORITHM
    )

    return token

def decode_token(token: str) -> dict:
    """Decode and verify a JWT token.

    Args:
        token (str): The JWT token to decode

    Returns:
        dict: Decoded token payload

    Raises:
        Unauthorized: If the token is empty, expired or fails verification
    """
    if not token:
        raise Unauthorized()

    try:
        return jwt.decode(
            jwt = token,
            key = Config.JWT_SECRET,
            algorithms = [Config.JWT_ALGORITHM]
        )
    except jwt.ExpiredSignatureError as e:
        logger.warning(f"Token expired: {str(e)}")
        raise Unauthorized()
    except jwt.PyJWTError as e:
        logger.warning(f"JWT error: {str(e)}")
        raise Unauthorized()
