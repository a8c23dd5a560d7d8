# mentorconnect/api/auth.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from mentorconnect.api.deps import get_identity, get_signed_in_identity
from mentorconnect.crud import profile as profile_crud
from mentorconnect.database import get_db
from mentorconnect.identity import ActionResult, IdentityContext
from mentorconnect.schemas.auth import (
    LoginRequest,
    PasswordResetConfirm,
    PasswordResetRequest,
    RegisterRequest,
    Token,
    UserOut,
)
from mentorconnect.utils.security import (
    authenticate_user,
    create_access_token,
    get_password_hash,
    reset_token_is_current,
    verify_reset_token,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


# ===== REGISTER ENDPOINT =====

@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(user_data: RegisterRequest, db: Session = Depends(get_db)):
    """Register a new student or mentor account"""
    normalized_email = user_data.email.strip().lower()

    if profile_crud.get_profile_by_email(db, normalized_email):
        raise HTTPException(status_code=400, detail="Email already registered")

    try:
        profile = profile_crud.create_profile(
            db,
            email=normalized_email,
            full_name=user_data.full_name.strip(),
            password_hash=get_password_hash(user_data.password),
            role=user_data.role,
        )
        if user_data.role == "mentor":
            profile_crud.create_mentor(
                db,
                profile_id=profile.id,
                bio=user_data.bio,
                expertise=user_data.expertise,
                languages=user_data.languages,
                experience_years=user_data.experience_years,
                hourly_rate=user_data.hourly_rate,
            )
        db.commit()
        db.refresh(profile)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Registration failed for %s", normalized_email)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )

    return {
        "message": "Registration successful",
        "user_id": profile.id,
        "email": profile.email,
        "role": profile.role,
    }


# ===== LOGIN ENDPOINT =====

@router.post("/login", response_model=Token)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Verify credentials and return access token"""
    user = authenticate_user(db, credentials.email.strip().lower(), credentials.password)

    if not user:
        raise HTTPException(status_code=401, detail="Invalid email or password")

    access_token = create_access_token(data={"sub": user.email, "role": user.role})

    return {
        "access_token": access_token,
        "token_type": "bearer",
        "role": user.role
    }


@router.post("/token", response_model=Token)
def login_for_access_token(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    """Form login used by the interactive docs; the username field carries the email"""
    return login(LoginRequest(email=form_data.username, password=form_data.password), db=db)


@router.post("/logout")
def logout(identity: IdentityContext = Depends(get_signed_in_identity)):
    """Drop the caller's workspace. The token itself simply expires."""
    identity.sign_out()
    return {"message": "Signed out"}


@router.get("/me", response_model=UserOut)
def me(identity: IdentityContext = Depends(get_signed_in_identity)):
    return identity.user


# ===== PASSWORD RESET =====

@router.post("/reset-password", response_model=ActionResult)
def reset_password(
    request: PasswordResetRequest,
    identity: IdentityContext = Depends(get_identity),
):
    result = identity.reset_password(request.email)
    if not result.ok:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=result.error)
    return result


@router.post("/reset-password/confirm", response_model=ActionResult)
def confirm_password_reset(request: PasswordResetConfirm, db: Session = Depends(get_db)):
    token_data = verify_reset_token(request.token)
    if token_data is None:
        raise HTTPException(status_code=400, detail="Reset link is invalid or has expired")

    profile = profile_crud.get_profile_by_email(db, token_data.email)
    if profile is None or not reset_token_is_current(token_data, profile.password_hash):
        raise HTTPException(status_code=400, detail="Reset link is invalid or has expired")

    profile_crud.update_password_hash(db, profile.id, get_password_hash(request.new_password))
    db.commit()
    return ActionResult(ok=True)
