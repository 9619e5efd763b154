# app/routers/product.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from app.storage import get_repository
from app.crud import product as crud
from app.repositories.product import ProductRepository
from app.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductRead,
    NotFoundMessage,
)

router = APIRouter(prefix="/produtos", tags=["produtos"])

# ProductNotFoundError -> 404 este mapat global în app/main.py
_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": NotFoundMessage}}


@router.get(
    "",
    response_model=List[ProductRead],
    summary="List all products",
)
def list_products(repo: ProductRepository = Depends(get_repository)):
    """Returnează toate produsele, în ordinea creării (fără paginare)."""
    return [ProductRead.from_product(p) for p in crud.list_products(repo)]


@router.get(
    "/{product_id}",
    response_model=ProductRead,
    responses=_NOT_FOUND,
    summary="Get a product by id",
)
def get_product(product_id: int, repo: ProductRepository = Depends(get_repository)):
    return ProductRead.from_product(crud.get(repo, product_id))


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
)
def create_product(payload: ProductCreate, repo: ProductRepository = Depends(get_repository)):
    return ProductRead.from_product(crud.create(repo, payload))


@router.put(
    "/{product_id}",
    response_model=ProductRead,
    responses=_NOT_FOUND,
    summary="Update a product",
)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    repo: ProductRepository = Depends(get_repository),
):
    return ProductRead.from_product(crud.update(repo, product_id, payload))


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_NOT_FOUND,
    summary="Delete a product",
)
def delete_product(product_id: int, repo: ProductRepository = Depends(get_repository)):
    crud.delete_by_id(repo, product_id)
    return None
