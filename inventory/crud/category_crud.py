from typing import List, Optional

from sqlalchemy.orm import Session
from inventory.models.category_model import Category


class CategoryRepository:
    """
    카테고리 테이블에 대한 기본 CRUD 접근 객체
    모든 메서드는 실패 시 SQLAlchemyError를 그대로 올려보냄
    """
    def __init__(self, db: Session):
        self.db = db

    # READ-ALL 전체 카테고리 목록 조회
    def find_all(self) -> List[Category]:
        return self.db.query(Category).order_by(Category.id).all()

    # READ 특정 카테고리 ID로 조회
    def find_by_id(self, category_id: int) -> Optional[Category]:
        return self.db.query(Category).filter(Category.id == category_id).first()

    # CREATE / UPDATE 카테고리 저장 (신규 추가 또는 변경 반영)
    def save(self, category: Category) -> Category:
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)
        return category

    # 카테고리 존재 여부 확인
    def exists_by_id(self, category_id: int) -> bool:
        return self.db.query(Category.id).filter(Category.id == category_id).first() is not None

    # DELETE 카테고리 삭제
    def delete_by_id(self, category_id: int) -> None:
        self.db.query(Category).filter(Category.id == category_id).delete(synchronize_session=False)
        self.db.commit()

    # DELETE-ALL 전체 카테고리 삭제
    def delete_all(self) -> None:
        self.db.query(Category).delete(synchronize_session=False)
        self.db.commit()

    # 실패한 작업 되돌리기
    def rollback(self) -> None:
        self.db.rollback()
