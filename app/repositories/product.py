from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Optional, Tuple

from app.models.product import Product


class ProductError(Exception):
    """Baza pentru erorile de domeniu ale produselor."""


class ProductNotFoundError(ProductError):
    """Ridicată când nu există niciun produs cu id-ul cerut."""

    def __init__(self, product_id: int) -> None:
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found.")


class ProductRepository:
    """
    Colecția autoritară de produse, ținută în memoria procesului.

    - Ordinea de iterare este ordinea inserării (dict-ul păstrează ordinea,
      iar ștergerea nu o perturbă pe a celorlalte).
    - Id-urile vin dintr-un contor monoton (`_next_id`), independent de
      mărimea colecției, deci nu se refolosesc niciodată după ștergere.
    - Toate operațiile trec prin același lock: handler-ele sync FastAPI rulează
      în threadpool și pot atinge simultan aceeași instanță.
    - Se întorc copii; obiectele din colecție nu ies din repository.
    """

    def __init__(self, seed: Optional[Iterable[Tuple[str, float]]] = None) -> None:
        self._items: Dict[int, Product] = {}
        self._next_id = 1
        self._lock = threading.RLock()
        for name, price in seed or ():
            self.create(name, price)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def list(self) -> List[Product]:
        with self._lock:
            return [p.copy() for p in self._items.values()]

    def get_by_id(self, product_id: int) -> Product:
        with self._lock:
            return self._get(product_id).copy()

    def create(self, name: str, price: float) -> Product:
        with self._lock:
            obj = Product(id=self._next_id, name=name, price=price)
            self._next_id += 1
            self._items[obj.id] = obj
            return obj.copy()

    def update(self, product_id: int, name: str, price: float) -> Product:
        with self._lock:
            obj = self._get(product_id)
            obj.name = name
            obj.price = price
            return obj.copy()

    def delete_by_id(self, product_id: int) -> None:
        with self._lock:
            self._get(product_id)
            del self._items[product_id]

    def _get(self, product_id: int) -> Product:
        obj = self._items.get(product_id)
        if obj is None:
            raise ProductNotFoundError(product_id)
        return obj
