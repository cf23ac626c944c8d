from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.auth import jwt_handler
from backend.auth.dependencies import get_current_user
from backend.database import get_db
from backend.models.user import User
from backend.schemas.user import CurrentSessionResponse, LoginRequest, SafeUser, SessionResponse

router = APIRouter(tags=['session'])

INVALID_CREDENTIALS_DETAIL = 'The provided credentials were invalid.'


def build_session_response(user: SafeUser) -> SessionResponse:
    return SessionResponse(
        user=user,
        access_token=jwt_handler.create_access_token(user.id),
        token_type=jwt_handler.TOKEN_TYPE,
    )


@router.post('', response_model=SessionResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    user = User.login(db, payload.credential, payload.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS_DETAIL,
        )
    return build_session_response(user)


@router.get('', response_model=CurrentSessionResponse)
def restore_session(current_user: SafeUser = Depends(get_current_user)):
    return CurrentSessionResponse(user=current_user)
