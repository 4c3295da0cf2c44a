import logging
from typing import Callable, Iterable, NamedTuple

from fastapi import status

from inventory.crud.category_crud import CategoryRepository
from inventory.models.category_model import Category
from inventory.schemas.category_schema import CategoryRequest
from inventory.schemas.response_schema import (
    CODE_DB_ERROR,
    CODE_NOT_FOUND,
    CODE_OK,
    CODE_SAVE_FAILED,
    CategoryResponseRest,
    ResponseType,
)

logger = logging.getLogger(__name__)


class ServiceResult(NamedTuple):
    envelope: CategoryResponseRest
    status_code: int


def build_result(
    response_type: ResponseType,
    code: str,
    message: str,
    status_code: int,
    categories: Iterable[Category] = (),
) -> ServiceResult:
    response = CategoryResponseRest()
    response.set_metadata(response_type, code, message)
    response.set_categories(categories)
    return ServiceResult(response, status_code)


def not_found(category_id: int) -> ServiceResult:
    return build_result(
        ResponseType.NOT_FOUND,
        CODE_NOT_FOUND,
        f"Category not found with ID: {category_id}",
        status.HTTP_404_NOT_FOUND,
    )


class CategoryService:
    """
    카테고리(Category) 관련 비즈니스 로직을 관리하는 서비스 클래스

    모든 메서드는 저장소 호출을 한 번 수행하고 그 결과를 응답 봉투와
    HTTP 상태 코드로 돌려준다. 저장소나 드라이버에서 올라온 예외는 종류와
    관계없이 여기서 잡아 ERROR(-1)/500 으로 바꾼다.
    """
    def __init__(self, repository: CategoryRepository):
        self.repository = repository

    def _execute(self, operation: Callable[[], ServiceResult], error_message: str) -> ServiceResult:
        """Run ``operation`` and turn any failure it raises into an ERROR result.

        The session is rolled back so a half-finished write never reaches the
        database.  The exception is logged with its traceback; the caller only
        receives ``error_message``.
        """
        try:
            return operation()
        except Exception:
            logger.exception(error_message)
            try:
                self.repository.rollback()
            except Exception:
                logger.exception("Rollback failed after: %s", error_message)
            return build_result(
                ResponseType.ERROR,
                CODE_DB_ERROR,
                error_message,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    # READ-ALL 전체 카테고리 조회
    def search(self) -> ServiceResult:
        def operation():
            categories = self.repository.find_all()
            return build_result(
                ResponseType.OK, CODE_OK, "Categories found", status.HTTP_200_OK, categories
            )

        return self._execute(operation, "Database error while retrieving categories")

    # READ 단일 카테고리 조회
    def search_by_id(self, category_id: int) -> ServiceResult:
        def operation():
            category = self.repository.find_by_id(category_id)
            if category is None:
                return not_found(category_id)
            return build_result(
                ResponseType.OK, CODE_OK, "Category found", status.HTTP_200_OK, [category]
            )

        return self._execute(
            operation, f"Database error while searching category with ID: {category_id}"
        )

    # CREATE 카테고리 추가
    def save(self, payload: CategoryRequest) -> ServiceResult:
        def operation():
            category = Category(name=payload.name, description=payload.description)
            saved = self.repository.save(category)
            if saved is None:
                return build_result(
                    ResponseType.ERROR,
                    CODE_SAVE_FAILED,
                    "Failed to save category",
                    status.HTTP_400_BAD_REQUEST,
                )
            logger.info("Created category %s", saved.id)
            return build_result(
                ResponseType.OK,
                CODE_OK,
                "Category saved successfully",
                status.HTTP_201_CREATED,
                [saved],
            )

        return self._execute(operation, "Database error while saving category")

    # UPDATE 카테고리 수정 (이름과 설명만 변경, ID는 유지)
    def update(self, payload: CategoryRequest, category_id: int) -> ServiceResult:
        def operation():
            category = self.repository.find_by_id(category_id)
            if category is None:
                return not_found(category_id)

            category.name = payload.name
            category.description = payload.description
            updated = self.repository.save(category)
            logger.info("Updated category %s", category_id)
            return build_result(
                ResponseType.OK,
                CODE_OK,
                "Category updated successfully",
                status.HTTP_200_OK,
                [updated],
            )

        return self._execute(
            operation, f"Database error while updating category with ID: {category_id}"
        )

    # DELETE 카테고리 삭제
    def delete_by_id(self, category_id: int) -> ServiceResult:
        def operation():
            if not self.repository.exists_by_id(category_id):
                return not_found(category_id)

            self.repository.delete_by_id(category_id)
            logger.info("Deleted category %s", category_id)
            return build_result(
                ResponseType.OK, CODE_OK, "Category deleted successfully", status.HTTP_200_OK
            )

        return self._execute(
            operation, f"Database error while deleting category with ID: {category_id}"
        )

    # DELETE-ALL 전체 카테고리 삭제
    def delete_all(self) -> ServiceResult:
        def operation():
            self.repository.delete_all()
            logger.info("Deleted all categories")
            return build_result(
                ResponseType.OK,
                CODE_OK,
                "All categories deleted successfully",
                status.HTTP_200_OK,
            )

        return self._execute(operation, "Database error while deleting all categories")
