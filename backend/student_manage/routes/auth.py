from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session
from student_manage.database.deps import get_db
from student_manage.schemas.user import UserCreate, UserLogin
from student_manage.services.users import authenticate_user, register_user

router = APIRouter(tags=["Auth"])

@router.post("/register", response_class=PlainTextResponse)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    register_user(db, name=payload.name, email=payload.email.strip(), password=payload.password)
    return "Registered Successfully"

@router.post("/login", response_class=PlainTextResponse)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    authenticate_user(db, credentials.email.strip(), credentials.password)
    return "Login Successful"
