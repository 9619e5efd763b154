# app/storage.py
from __future__ import annotations

import logging
from typing import Iterable, Optional

from app.repositories.product import ProductRepository
from app.schemas.product import ProductCreate

logger = logging.getLogger(__name__)

# -----------------------------
# Starea procesului
# -----------------------------
# O singură instanță pe proces; se pierde la oprire (fără persistență).
_repository: Optional[ProductRepository] = None


def init_repository(seed: Optional[Iterable[ProductCreate]] = None) -> ProductRepository:
    """
    (Re)creează repository-ul procesului, opțional cu produse inițiale.
    Apelat o dată la pornire, din lifespan.
    """
    global _repository
    _repository = ProductRepository((p.nome, p.preco) for p in seed or ())
    logger.info("Product repository initialised (seeded=%d)", len(_repository))
    return _repository


def get_repository() -> ProductRepository:
    """
    FastAPI dependency pentru repository-ul de produse.
    Dacă lifespan-ul nu a rulat încă (ex. import direct), pornește gol.
    """
    if _repository is None:
        return init_repository()
    return _repository


__all__ = [
    "init_repository",
    "get_repository",
]
