# app/schemas/product.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.models.product import Product


class ProductBase(BaseModel):
    """Câmpuri comune pentru produs; numele JSON sunt `nome` / `preco`."""
    nome: str
    # inf/NaN trec de json.loads, dar nu se pot serializa înapoi ca număr
    preco: float = Field(allow_inf_nan=False)

    model_config = ConfigDict(
        # oferă exemple utile în OpenAPI
        json_schema_extra={
            "examples": [
                {
                    "nome": "Produto A",
                    "preco": 100.0,
                }
            ]
        }
    )


class ProductCreate(ProductBase):
    """Payload pentru creare produs."""
    pass


class ProductUpdate(ProductBase):
    """Payload pentru update; înlocuiește complet `nome` și `preco`. Un `id` din body e ignorat."""
    pass


class ProductRead(BaseModel):
    """Răspuns pentru produs; `id` primul, ca în JSON-ul documentat."""
    id: int
    nome: str
    preco: float

    @classmethod
    def from_product(cls, obj: Product) -> ProductRead:
        return cls(id=obj.id, nome=obj.name, preco=obj.price)


class NotFoundMessage(BaseModel):
    """Corpul răspunsului 404 pentru produse."""
    mensagem: str = "Produto não encontrado"
