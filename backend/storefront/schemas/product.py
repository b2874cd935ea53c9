"""
storefront/schemas/product.py - Pydantic model for catalogue products.

| Field    | Type    | Description |
|----------|---------|-------------|
| id       | `str`   | Product ID |
| name     | `str`   | Product name |
| category | `str`   | Category label |
| cost     | `float` | Unit cost |
| rating   | `int`   | 0-5 stars |
| image    | `str`   | Image URL |
"""
from pydantic import BaseModel, Field


class Product(BaseModel):
    id: str
    name: str
    category: str = ""
    cost: float = Field(..., ge=0, description="Unit cost")
    rating: int = Field(0, ge=0, le=5)
    image: str = ""

    model_config = {"from_attributes": True}
