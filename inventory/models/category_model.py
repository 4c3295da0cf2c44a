from sqlalchemy import Column, String, BigInteger, Integer
from inventory.core.database import Base  # SQLAlchemy Base 클래스, 모든 모델은 이 클래스를 상속해야 함

class Category(Base):

    __tablename__ = "category"  # DB 테이블명 지정

    # 고유 ID, 자동 증가 (SQLite는 INTEGER PK만 자동 증가)
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True)

    # 카테고리 이름
    name = Column(String(100), nullable=False)  # 필수

    # 카테고리 설명
    description = Column(String(255), nullable=True)  # 옵션

    def __repr__(self):
        return f"<Category id={self.id} name={self.name!r}>"
