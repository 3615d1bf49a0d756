from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from portfolio_api.database import _set_sqlite_pragmas, get_db, init_db
from portfolio_api.main import app
from portfolio_api.models import Profile, Project, Skill, WorkExperience
from portfolio_api.utils.clock import TIMESTAMP_FORMAT

_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def test_db(tmp_path):
    db_path = tmp_path / "db.sqlite"
    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _set_sqlite_pragmas)
    TestSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    init_db(db_path)

    def override_get_db():
        db = TestSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestSession
    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture
def db(test_db):
    session = test_db()
    yield session
    session.close()


@pytest.fixture
def client(test_db):
    return TestClient(app)


class Seeder:
    """Inserts rows directly so tests control created_at.

    Each row gets a timestamp one minute after the previous one unless
    ``created_at`` is given, so later rows are newer.
    """

    def __init__(self, session):
        self.session = session
        self._tick = 0

    def _next_ts(self, created_at=None) -> str:
        self._tick += 1
        return created_at or (_EPOCH + timedelta(minutes=self._tick)).strftime(TIMESTAMP_FORMAT)

    def _add(self, obj):
        self.session.add(obj)
        self.session.commit()
        return obj

    def profile(self, name="John Doe", email="john.doe@example.com", education=None,
                created_at=None):
        ts = self._next_ts(created_at)
        return self._add(Profile(
            id=f"profile-{self._tick}", name=name, email=email, education=education,
            created_at=ts, updated_at=ts,
        ))

    def skill(self, name, category=None, proficiency_level="intermediate", created_at=None):
        ts = self._next_ts(created_at)
        return self._add(Skill(
            id=f"skill-{self._tick}", name=name, category=category,
            proficiency_level=proficiency_level, created_at=ts,
        ))

    def project(self, title, description="", skills=(), created_at=None):
        ts = self._next_ts(created_at)
        project = Project(
            id=f"project-{self._tick}", title=title, description=description,
            created_at=ts, updated_at=ts,
        )
        project.skills = list(skills)
        return self._add(project)

    def work(self, company, position, description=None, start_date=None, created_at=None):
        ts = self._next_ts(created_at)
        return self._add(WorkExperience(
            id=f"work-{self._tick}", company=company, position=position,
            description=description, start_date=start_date, created_at=ts,
        ))


@pytest.fixture
def seed(db):
    return Seeder(db)
