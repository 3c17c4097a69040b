from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from usertodo.database import get_db
from usertodo.errors import STATEMENT_ERRORS, ResourceNotFound, StoreError
from usertodo.models.user import User
from usertodo.schemas.envelope import ERROR_RESPONSES, NOT_FOUND_RESPONSE, Envelope
from usertodo.schemas.user import UserIn, UserOut
from usertodo.utils.responses import success

router = APIRouter(prefix="/users", tags=["users"], responses=ERROR_RESPONSES)


def _out(user: User) -> dict:
    return UserOut.model_validate(user).model_dump()


@router.post("", status_code=201, response_model=Envelope[UserOut])
def create_user(user: UserIn, db: Session = Depends(get_db)):
    new = User(**user.model_dump())
    try:
        db.add(new)
        db.commit()
        db.refresh(new)
    except STATEMENT_ERRORS as exc:
        db.rollback()
        raise StoreError.from_exception(exc) from exc
    return success("Data inserted successfully", _out(new), status_code=201)


@router.api_route("", methods=["GET", "HEAD"], response_model=Envelope[list[UserOut]])
def list_users(db: Session = Depends(get_db)):
    try:
        users = db.query(User).all()
    except STATEMENT_ERRORS as exc:
        db.rollback()
        raise StoreError.from_exception(exc) from exc
    return success("Users retrieved successfully", [_out(u) for u in users])


@router.api_route("/{user_id}", methods=["GET", "HEAD"], response_model=Envelope[list[UserOut]], responses=NOT_FOUND_RESPONSE)
def get_user(user_id: int, db: Session = Depends(get_db)):
    """Matching rows come back as a list, even though at most one can match."""
    try:
        users = db.query(User).filter(User.id == user_id).all()
    except STATEMENT_ERRORS as exc:
        db.rollback()
        raise StoreError.from_exception(exc) from exc
    if not users:
        raise ResourceNotFound("User")
    return success("Users retrieved successfully", [_out(u) for u in users])


@router.put("/{user_id}", response_model=Envelope[UserOut], responses=NOT_FOUND_RESPONSE)
def update_user(user_id: int, user: UserIn, db: Session = Depends(get_db)):
    """Full replace: every field is written, omitted ones as NULL.

    ``updated_at`` is left untouched.
    """
    try:
        obj = db.query(User).filter(User.id == user_id).first()
        if obj is None:
            raise ResourceNotFound("User")
        for field, value in user.model_dump().items():
            setattr(obj, field, value)
        db.commit()
        db.refresh(obj)
    except STATEMENT_ERRORS as exc:
        db.rollback()
        raise StoreError.from_exception(exc) from exc
    return success("Users updated successfully", _out(obj))


@router.delete("/{user_id}", response_model=Envelope, responses=NOT_FOUND_RESPONSE)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    # the store cascades the delete to the user's todos
    try:
        deleted = db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
        db.commit()
    except STATEMENT_ERRORS as exc:
        db.rollback()
        raise StoreError.from_exception(exc) from exc
    if deleted == 0:
        raise ResourceNotFound("User")
    return success("Users deleted successfully", None)
