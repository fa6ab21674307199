from pydantic import BaseModel
from typing import Optional

from database.document import Document


class CategoryModel(Document):
    collection_name = "categories"


class CategoryRequest(BaseModel):
    # để handler tự trả lỗi "Name is required" thay vì 422
    name: Optional[str] = None
