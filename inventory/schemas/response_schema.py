from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from inventory.schemas.category_schema import CategoryResponse


# 응답 상태 종류
class ResponseType(str, Enum):
    OK = "OK"
    NOT_FOUND = "NOT_FOUND"
    ERROR = "ERROR"


# 상태 상세 코드
CODE_OK = "00"
CODE_NOT_FOUND = "01"
CODE_SAVE_FAILED = "02"
CODE_DB_ERROR = "-1"


# 응답 상태 메타데이터 (type, code, message)
class ResponseMetadata(BaseModel):
    type: ResponseType
    code: str
    message: str


# 결과 카테고리 목록
class CategoryList(BaseModel):
    category: List[CategoryResponse] = []


# 모든 카테고리 API가 공통으로 쓰는 응답 봉투
class CategoryResponseRest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    metadata: List[ResponseMetadata] = []
    category_response: CategoryList = Field(default_factory=CategoryList, alias="categoryResponse")

    def set_metadata(self, status: ResponseType, code: str, message: str) -> None:
        self.metadata = [ResponseMetadata(type=status, code=code, message=message)]

    def set_categories(self, categories) -> None:
        self.category_response.category = [
            CategoryResponse.model_validate(category) for category in categories
        ]
