from pydantic import BaseModel, ConfigDict
from typing import Optional

# 기본 스키마
class CategoryBase(BaseModel):
    name: str
    description: Optional[str] = None

# 생성/수정 요청 스키마 (id 등 다른 필드는 무시됨)
class CategoryRequest(CategoryBase):
    pass

# 응답용 스키마 (ORM 객체에서 바로 변환)
class CategoryResponse(CategoryBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
