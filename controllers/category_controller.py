import logging
from typing import Callable, Optional

from fastapi import APIRouter, Depends

from controllers.handler import run_handler
from logger import get_logger
from models.category import CategoryModel, CategoryRequest
from response_formatter import HandlerResult
from services.auth_service import require_admin
from utils.slug import get_slugify

router = APIRouter(prefix="/api/v1/category", tags=["Category"])


def get_category_model():
    return CategoryModel


# 🔹 Create (admin)
@router.post("/create-category", dependencies=[Depends(require_admin)])
async def create_category_controller(
    req: Optional[CategoryRequest] = None,
    model=Depends(get_category_model),
    slugify: Callable[[str], str] = Depends(get_slugify),
    logger: logging.Logger = Depends(get_logger),
):
    # thiếu body cũng coi như thiếu name
    if not req or not req.name:
        return HandlerResult(401, {"message": "Name is required"}).to_response()

    async def operation() -> HandlerResult:
        existing = await model.find_one({"name": req.name})
        if existing:
            return HandlerResult(200, {"success": True, "message": "Category Already Exisits"})
        category = await model(name=req.name, slug=slugify(req.name)).save()
        return HandlerResult(201, {
            "success": True,
            "message": "new category created",
            "category": category,
        })

    return await run_handler(operation, "Error in Category", logger)


# 🔹 Update (admin)
@router.put("/update-category/{id}", dependencies=[Depends(require_admin)])
async def update_category_controller(
    id: int,
    req: Optional[CategoryRequest] = None,
    model=Depends(get_category_model),
    slugify: Callable[[str], str] = Depends(get_slugify),
    logger: logging.Logger = Depends(get_logger),
):
    name = req.name if req else None

    async def operation() -> HandlerResult:
        category = await model.find_by_id_and_update(
            id, {"name": name, "slug": slugify(name)}, new=True
        )
        # "messsage" giữ nguyên, client cũ đang đọc key này
        return HandlerResult(200, {
            "success": True,
            "messsage": "Category Updated Successfully",
            "category": category,
        })

    return await run_handler(operation, "Error while updating category", logger)


# 🔹 Public GET
@router.get("/get-category")
async def category_controller(
    model=Depends(get_category_model),
    logger: logging.Logger = Depends(get_logger),
):
    async def operation() -> HandlerResult:
        categories = await model.find({})
        return HandlerResult(200, {
            "success": True,
            "message": "All Categories List",
            "category": categories,
        })

    return await run_handler(operation, "Error while getting all categories", logger)


@router.get("/single-category/{slug}")
async def single_category_controller(
    slug: str,
    model=Depends(get_category_model),
    logger: logging.Logger = Depends(get_logger),
):
    async def operation() -> HandlerResult:
        category = await model.find_one({"slug": slug})
        return HandlerResult(200, {
            "success": True,
            "message": "Get SIngle Category SUccessfully",
            "category": category,
        })

    return await run_handler(operation, "Error While getting Single Category", logger)


# 🔹 Delete (admin)
@router.delete("/delete-category/{id}", dependencies=[Depends(require_admin)])
async def delete_category_controller(
    id: int,
    model=Depends(get_category_model),
    logger: logging.Logger = Depends(get_logger),
):
    async def operation() -> HandlerResult:
        await model.find_by_id_and_delete(id)
        return HandlerResult(200, {"success": True, "message": "Categry Deleted Successfully"})

    return await run_handler(operation, "error while deleting category", logger)
