"""
Product Catalog Data

The storefront's fixed in-memory catalog. Products are immutable and are
served through ``catalog.repositories.ProductRepository``.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any

PLACEHOLDER_IMAGE = "/placeholder.svg?height=300&width=300"


@dataclass(frozen=True)
class Product:
    """A read-only catalog entry."""
    id: str
    name: str
    price: float
    image: str
    category: str
    description: str

    @property
    def search_text(self) -> str:
        """Lowercased ``name description category`` used for substring matching."""
        return f"{self.name} {self.description} {self.category}".lower()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


MOCK_PRODUCTS = (
    Product(
        id="1",
        name="Red Floral Summer Dress",
        price=49.99,
        image=PLACEHOLDER_IMAGE,
        category="clothing",
        description="A beautiful red dress with floral print, perfect for summer outings and casual events.",
    ),
    Product(
        id="2",
        name="Blue Denim Jeans",
        price=59.99,
        image=PLACEHOLDER_IMAGE,
        category="clothing",
        description="Classic blue denim jeans with a comfortable fit and durable material for everyday wear.",
    ),
    Product(
        id="3",
        name="Men's Running Shoes",
        price=89.99,
        image=PLACEHOLDER_IMAGE,
        category="footwear",
        description="Comfortable running shoes with cushioned soles for maximum support during workouts and runs.",
    ),
    Product(
        id="4",
        name="Wireless Bluetooth Headphones",
        price=129.99,
        image=PLACEHOLDER_IMAGE,
        category="electronics",
        description="High-quality wireless headphones with noise cancellation and long battery life.",
    ),
    Product(
        id="5",
        name="Leather Crossbody Bag",
        price=79.99,
        image=PLACEHOLDER_IMAGE,
        category="accessories",
        description="Stylish leather crossbody bag with multiple compartments, perfect for everyday use.",
    ),
    Product(
        id="6",
        name="Smart Fitness Watch",
        price=149.99,
        image=PLACEHOLDER_IMAGE,
        category="electronics",
        description="Track your fitness goals with this advanced smartwatch featuring heart rate monitoring and GPS.",
    ),
    Product(
        id="7",
        name="Women's Black Leather Jacket",
        price=199.99,
        image=PLACEHOLDER_IMAGE,
        category="clothing",
        description="Classic black leather jacket for women, perfect for adding an edge to any outfit.",
    ),
    Product(
        id="8",
        name="Men's Casual Button-Down Shirt",
        price=45.99,
        image=PLACEHOLDER_IMAGE,
        category="clothing",
        description="Comfortable and stylish button-down shirt for men, suitable for casual and semi-formal occasions.",
    ),
    Product(
        id="9",
        name="Stainless Steel Water Bottle",
        price=24.99,
        image=PLACEHOLDER_IMAGE,
        category="accessories",
        description="Eco-friendly stainless steel water bottle that keeps drinks cold for 24 hours or hot for 12 hours.",
    ),
    Product(
        id="10",
        name="Wireless Charging Pad",
        price=35.99,
        image=PLACEHOLDER_IMAGE,
        category="electronics",
        description="Fast wireless charging pad compatible with all Qi-enabled devices.",
    ),
    Product(
        id="11",
        name="Yoga Mat",
        price=29.99,
        image=PLACEHOLDER_IMAGE,
        category="sports",
        description="Non-slip yoga mat with comfortable padding for all types of yoga and floor exercises.",
    ),
    Product(
        id="12",
        name="Ceramic Coffee Mug Set",
        price=39.99,
        image=PLACEHOLDER_IMAGE,
        category="home",
        description="Set of 4 ceramic coffee mugs in assorted colors, microwave and dishwasher safe.",
    ),
)
