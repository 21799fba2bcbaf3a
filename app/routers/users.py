"""Users API — create a user and list all users."""

from fastapi import APIRouter, Depends

from ..database import ExerciseStore
from ..dependencies import get_store, read_form
from ..errors import ExerciseTrackerError
from ..schemas.exercise import NewUserForm, UserOut
from ..services import user_service
from . import failure

router = APIRouter(prefix="/api/exercise", tags=["users"])


@router.post("/new-user", response_model=UserOut)
async def new_user(form: dict = Depends(read_form), store: ExerciseStore = Depends(get_store)):
    body = NewUserForm.model_validate(form)
    try:
        user = await user_service.create_user(store, body.username)
    except ExerciseTrackerError as e:
        return failure(e)
    return user.to_dict()


@router.get("/users", response_model=list[UserOut])
async def list_users(store: ExerciseStore = Depends(get_store)):
    try:
        users = await user_service.list_users(store)
    except ExerciseTrackerError as e:
        return failure(e)
    return [u.to_dict() for u in users]
