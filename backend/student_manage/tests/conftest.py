import os
import tempfile
from pathlib import Path
from uuid import uuid4

import pytest

TEST_DB_FILE = Path(tempfile.gettempdir()) / f"test_student_manage_{uuid4().hex}.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_FILE.as_posix()}"
os.environ["DB_BOOTSTRAP_MODE"] = "off"
os.environ["RECONCILE_EXPLICIT_UNIQUE_NO"] = "false"
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from student_manage.database.base import Base  # noqa: E402
from student_manage.database.session import SessionLocal, engine  # noqa: E402
import student_manage.models  # noqa: E402,F401


@pytest.fixture(autouse=True)
def reset_database():
    engine.dispose()
    if TEST_DB_FILE.exists():
        TEST_DB_FILE.unlink()
    Base.metadata.create_all(bind=engine)
    try:
        yield
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
        if TEST_DB_FILE.exists():
            TEST_DB_FILE.unlink()


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
