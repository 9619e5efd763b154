# app/crud/product.py
from __future__ import annotations

import logging
from typing import List

from app.models.product import Product
from app.repositories.product import ProductNotFoundError, ProductRepository
from app.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)

__all__ = [
    "ProductNotFoundError",
    "list_products",
    "get",
    "create",
    "update",
    "delete_by_id",
]


def list_products(repo: ProductRepository) -> List[Product]:
    """Toate produsele, în ordinea creării."""
    return repo.list()


def get(repo: ProductRepository, product_id: int) -> Product:
    """Returnează produsul după ID; ridică ProductNotFoundError dacă lipsește."""
    return repo.get_by_id(product_id)


def create(repo: ProductRepository, data: ProductCreate) -> Product:
    obj = repo.create(data.nome, data.preco)
    logger.info("Product created id=%s", obj.id)
    return obj


def update(repo: ProductRepository, product_id: int, data: ProductUpdate) -> Product:
    """
    Înlocuiește `nome` și `preco`; id-ul rămâne neschimbat.
    Ridică ProductNotFoundError dacă produsul nu există.
    """
    obj = repo.update(product_id, data.nome, data.preco)
    logger.info("Product updated id=%s", obj.id)
    return obj


def delete_by_id(repo: ProductRepository, product_id: int) -> None:
    """Șterge produsul după ID; ridică ProductNotFoundError dacă lipsește."""
    repo.delete_by_id(product_id)
    logger.info("Product deleted id=%s", product_id)
