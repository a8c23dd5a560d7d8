import hashlib
from datetime import datetime, timedelta, UTC
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from mentorconnect import models, schemas
from mentorconnect.config import settings
from mentorconnect.database import get_db


# ==========================
# AUTH CONFIG
# ==========================

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")
optional_oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token", auto_error=False)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto"
)

RESET_PURPOSE = "reset"


# ==========================
# PASSWORD UTILS
# ==========================

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    Bcrypt max input length = 72 bytes
    Truncate safely to avoid crash
    """
    password_bytes = password.encode("utf-8")

    if len(password_bytes) > 72:
        password_bytes = password_bytes[:72]
        password = password_bytes.decode("utf-8", errors="ignore")

    return pwd_context.hash(password)


# ==========================
# JWT TOKEN
# ==========================

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.now(UTC) + expires_delta
    else:
        expire = datetime.now(UTC) + timedelta(
            minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )

    to_encode.update({"exp": expire})

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM
    )


def password_fingerprint(password_hash: str) -> str:
    return hashlib.sha256(password_hash.encode("utf-8")).hexdigest()[:16]


def create_reset_token(email: str, password_hash: str) -> str:
    """Single-use: changing the password changes the fingerprint it is bound to."""
    return create_access_token(
        data={"sub": email, "purpose": RESET_PURPOSE, "pwd": password_fingerprint(password_hash)},
        expires_delta=timedelta(minutes=settings.RESET_TOKEN_EXPIRE_MINUTES),
    )


def decode_token(token: str) -> schemas.TokenData:
    """
    Raises:
        JWTError: If the token is invalid, expired or has no subject
    """
    payload = jwt.decode(
        token,
        settings.SECRET_KEY,
        algorithms=[settings.ALGORITHM]
    )
    email = payload.get("sub")
    if email is None:
        raise JWTError("Token has no subject")
    return schemas.TokenData(
        email=email,
        role=payload.get("role"),
        purpose=payload.get("purpose"),
        fingerprint=payload.get("pwd"),
    )


def verify_reset_token(token: str) -> Optional[schemas.TokenData]:
    """Claims of a valid reset token, else None."""
    try:
        token_data = decode_token(token)
    except JWTError:
        return None
    if token_data.purpose != RESET_PURPOSE:
        return None
    return token_data


def reset_token_is_current(token_data: schemas.TokenData, password_hash: str) -> bool:
    return token_data.fingerprint == password_fingerprint(password_hash)


# ==========================
# AUTH HELPERS
# ==========================

def authenticate_user(db: Session, email: str, password: str):
    user = db.query(models.Profile).filter(
        models.Profile.email == email
    ).first()

    if not user:
        return False

    if not verify_password(password, user.password_hash):
        return False

    return user


def _user_from_token(db: Session, token: str) -> Optional[models.Profile]:
    try:
        token_data = decode_token(token)
    except JWTError:
        return None

    # Reset tokens never authenticate API calls
    if token_data.purpose is not None:
        return None

    return db.query(models.Profile).filter(
        models.Profile.email == token_data.email
    ).first()


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
):
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    user = _user_from_token(db, token)
    if user is None:
        raise credentials_exception

    return user


def get_optional_user(
    token: Optional[str] = Depends(optional_oauth2_scheme),
    db: Session = Depends(get_db)
):
    """Like ``get_current_user`` but anonymous callers get None."""
    if not token:
        return None
    return _user_from_token(db, token)
