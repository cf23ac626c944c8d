from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from backend.core.errors import ValidationError
from backend.database import get_db
from backend.models.user import User
from backend.routes.session_routes import build_session_response
from backend.schemas.user import PublicUser, SessionResponse, SignupRequest, UserView

router = APIRouter(tags=['users'])


@router.post('', response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
def signup(payload: SignupRequest, db: Session = Depends(get_db)):
    try:
        user = User.signup(db, payload.username, payload.email, payload.password)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={'message': 'Validation error', 'errors': exc.errors},
        ) from exc
    return build_session_response(user)


@router.get('/{user_id}', response_model=PublicUser)
def get_user(user_id: int, db: Session = Depends(get_db)):
    user = User.get_current_user_by_id(db, user_id, view=UserView.PUBLIC)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='User not found.')
    return user
