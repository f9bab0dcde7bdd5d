"""Categories API router."""

from fastapi import APIRouter, Depends, HTTPException

from api.models.schemas import CategoryItem
from api.services.catalog import CatalogService, get_catalog_service

router = APIRouter()


def _to_item(category) -> CategoryItem:
    return CategoryItem(
        id=category.id,
        name=category.name,
        description=category.description,
        imageUrl=category.image_url,
    )


@router.get("", response_model=list[CategoryItem])
async def list_categories(service: CatalogService = Depends(get_catalog_service)):
    """List all product categories."""
    return [_to_item(c) for c in service.list_categories()]


@router.get("/{category_id}", response_model=CategoryItem)
async def get_category(
    category_id: int,
    service: CatalogService = Depends(get_catalog_service),
):
    """Get a single category."""
    category = service.get_category(category_id)
    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return _to_item(category)
