from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from inventory.core.config import settings

# DB 접속 URL
DB_URL = settings.db_url

engine_options = {"pool_pre_ping": True}

# SQLite는 요청 스레드가 달라도 같은 연결을 쓰도록 설정
if DB_URL.startswith("sqlite"):
    engine_options["connect_args"] = {"check_same_thread": False}
    # 메모리 DB는 연결 하나를 공유해야 모든 세션이 같은 테이블을 본다
    if DB_URL in ("sqlite://", "sqlite:///:memory:"):
        engine_options["poolclass"] = StaticPool

# SQLAlchemy 엔진
engine = create_engine(DB_URL, **engine_options)

# DB 세션 팩토리
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# ORM 베이스 클래스
Base = declarative_base()


# DB 세션 의존성
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
