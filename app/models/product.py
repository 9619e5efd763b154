from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class Product:
    """
    Produs ținut în memorie.

    Note:
    - `id` este atribuit exclusiv de repository și nu se schimbă după creare.
    - `name` / `price` sunt pass-through: repository-ul nu le validează.
    """
    id: int
    name: str
    price: float

    def copy(self) -> Product:
        return replace(self)

    def __repr__(self) -> str:
        # scurtează numele în repr pentru loguri mai curate
        name_preview = (self.name[:32] + "…") if self.name and len(self.name) > 33 else self.name
        return f"<Product id={self.id!r} name={name_preview!r} price={self.price!r}>"
