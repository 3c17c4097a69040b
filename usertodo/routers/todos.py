from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from usertodo.database import get_db
from usertodo.errors import STATEMENT_ERRORS, StoreError
from usertodo.models.todo import Todo
from usertodo.schemas.envelope import ERROR_RESPONSES, Envelope
from usertodo.schemas.todo import TodoIn, TodoOut
from usertodo.utils.responses import success

# Todos are create and list only
router = APIRouter(prefix="/todos", tags=["todos"], responses=ERROR_RESPONSES)


@router.post("", status_code=201, response_model=Envelope[TodoOut])
def create_todo(todo: TodoIn, db: Session = Depends(get_db)):
    new = Todo(user_id=todo.user_id, title=todo.title, description=todo.description)
    try:
        db.add(new)
        db.commit()
        db.refresh(new)
    except STATEMENT_ERRORS as exc:
        db.rollback()
        raise StoreError.from_exception(exc) from exc
    return success("To-do created successfully", TodoOut.model_validate(new).model_dump(), status_code=201)


@router.api_route("", methods=["GET", "HEAD"], response_model=Envelope[list[TodoOut]])
def list_todos(db: Session = Depends(get_db)):
    try:
        todos = db.query(Todo).all()
    except STATEMENT_ERRORS as exc:
        db.rollback()
        raise StoreError.from_exception(exc) from exc
    return success("TO-dos retrieved successfully", [TodoOut.model_validate(t).model_dump() for t in todos])
