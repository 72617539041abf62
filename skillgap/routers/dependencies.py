from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from skillgap.database import get_db
from skillgap.models.user import User
from skillgap.services.cache import CacheStore
from skillgap.services.enrichment import TextGenerator
from skillgap.utils.jwt_handler import decode_access_token


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")


def get_current_user(db: Session = Depends(get_db), token: str = Depends(oauth2_scheme)) -> User:
    token_data = decode_access_token(token)
    user = db.get(User, token_data.user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user


# Both live on app.state (see main.create_app); tests swap them via dependency_overrides.
def get_cache(request: Request) -> CacheStore:
    return request.app.state.cache


def get_llm_client(request: Request) -> TextGenerator:
    return request.app.state.llm_client
