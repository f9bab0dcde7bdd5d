"""Products API router."""

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional

from api.models.schemas import ProductItem
from api.services.catalog import CatalogService, get_catalog_service

router = APIRouter()


@router.get("", response_model=list[ProductItem])
async def list_products(
    category_id: Optional[int] = Query(None, alias="categoryId", description="Category id"),
    vendor_id: Optional[int] = Query(None, alias="vendorId", description="Vendor (farmer) id"),
    featured: bool = Query(False, description="Only featured products"),
    search: Optional[str] = Query(None, description="Text in product name or description"),
    service: CatalogService = Depends(get_catalog_service),
):
    """
    List products in server order.

    Only one narrowing applies: featured, else category, else vendor.
    ``search`` further keeps products whose name or description contains it.
    """
    products = service.list_products(
        category_id=category_id,
        vendor_id=vendor_id,
        featured=featured,
        search=search,
    )
    return [p.to_dict() for p in products]


@router.get("/{product_id}", response_model=ProductItem)
async def get_product(
    product_id: int,
    service: CatalogService = Depends(get_catalog_service),
):
    """Get a single product."""
    product = service.get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product.to_dict()
