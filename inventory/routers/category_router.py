from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from inventory.core.database import get_db
from inventory.crud.category_crud import CategoryRepository
from inventory.schemas.category_schema import CategoryRequest
from inventory.schemas.response_schema import CategoryResponseRest
from inventory.services.category_service import CategoryService, ServiceResult

# 카테고리 관련 API 라우터
router = APIRouter(prefix="/api/v1/categories", tags=["Categories"])


# 서비스 의존성 (요청마다 세션 하나)
def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(CategoryRepository(db))


# 서비스 결과의 상태 코드를 그대로 응답에 반영
def respond(result: ServiceResult, response: Response) -> CategoryResponseRest:
    response.status_code = result.status_code
    return result.envelope


# READ-ALL 전체 카테고리 조회
@router.get("", response_model=CategoryResponseRest)
def search_categories(response: Response, service: CategoryService = Depends(get_category_service)):
    return respond(service.search(), response)


# READ 단일 카테고리 조회
@router.get("/{category_id}", response_model=CategoryResponseRest)
def search_category_by_id(category_id: int, response: Response, service: CategoryService = Depends(get_category_service)):
    return respond(service.search_by_id(category_id), response)


# CREATE 카테고리 생성
@router.post("", response_model=CategoryResponseRest, status_code=201)
def save_category(category: CategoryRequest, response: Response, service: CategoryService = Depends(get_category_service)):
    return respond(service.save(category), response)


# UPDATE 카테고리 수정
@router.put("/{category_id}", response_model=CategoryResponseRest)
def update_category(category_id: int, category: CategoryRequest, response: Response, service: CategoryService = Depends(get_category_service)):
    return respond(service.update(category, category_id), response)


# DELETE 카테고리 삭제
@router.delete("/{category_id}", response_model=CategoryResponseRest)
def delete_category_by_id(category_id: int, response: Response, service: CategoryService = Depends(get_category_service)):
    return respond(service.delete_by_id(category_id), response)


# DELETE-ALL 전체 카테고리 삭제
@router.delete("", response_model=CategoryResponseRest)
def delete_all_categories(response: Response, service: CategoryService = Depends(get_category_service)):
    return respond(service.delete_all(), response)
