import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from skillgap.database import get_db
from skillgap.models.user import User
from skillgap.schemas.user import Token, UserCreate, UserLogin, UserRead
from skillgap.services.profile_service import apply_education, to_user_read
from skillgap.utils.jwt_handler import create_access_token
from skillgap.utils.password_hash import hash_password, verify_password


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)) -> UserRead:
    existing_user = db.query(User).filter(User.email == user_in.email).first()
    if existing_user:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="User already exists")
    user = User(
        email=user_in.email,
        password_hash=hash_password(user_in.password),
        name=user_in.name.strip(),
    )
    apply_education(user, user_in.education)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("registered user id=%s", user.id)
    return to_user_read(user)


@router.post("/login", response_model=Token)
def login_user(user_in: UserLogin, db: Session = Depends(get_db)) -> Token:
    user = db.query(User).filter(User.email == user_in.email).first()
    if not user or not verify_password(user_in.password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    token = create_access_token(user.id)
    return Token(access_token=token, token_type="bearer")
