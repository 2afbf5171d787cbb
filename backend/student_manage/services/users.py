from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from student_manage.core.errors import DuplicateEmail, InvalidCredentials, UserNotFound
from student_manage.core.security import get_password_hash, verify_password
from student_manage.models.user import User


def register_user(db: Session, name: str | None, email: str, password: str) -> User:
    user = User(
        name=name,
        email=email,
        password=get_password_hash(password),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise DuplicateEmail() from exc
    db.refresh(user)
    return user


def find_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def verify_user(db: Session, email: str, password: str) -> bool:
    user = find_by_email(db, email)
    if not user:
        raise UserNotFound()
    return verify_password(password, user.password)


def authenticate_user(db: Session, email: str, password: str) -> User:
    user = find_by_email(db, email)
    if not user:
        raise UserNotFound()
    if not verify_password(password, user.password):
        raise InvalidCredentials()
    return user
