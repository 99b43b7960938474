"""Demo catalogue inserted by the seed endpoint."""

from typing import Any

SEED_USERS: list[dict[str, Any]] = [
    {
        "email": "test1@google.com",
        "full_name": "Test One",
        "password": "Abc123",
        "roles": ["admin"],
    },
    {
        "email": "test2@google.com",
        "full_name": "Test Two",
        "password": "Abc123",
        "roles": ["user", "super-user"],
    },
]

SEED_PRODUCTS: list[dict[str, Any]] = [
    {
        "title": "Men's Chill Crew Neck Sweatshirt",
        "description": "Relaxed fit crew neck sweatshirt in a heavyweight cotton blend.",
        "price": 75,
        "stock": 7,
        "sizes": ["XS", "S", "M", "L", "XL", "XXL"],
        "gender": "men",
        "tags": ["sweatshirt"],
        "images": ["1740176-00-A_0_2000.jpg", "1740176-00-A_1.jpg"],
    },
    {
        "title": "Men's Quilted Shirt Jacket",
        "description": "Quilted shirt jacket with a water-repellent outer shell.",
        "price": 200,
        "stock": 5,
        "sizes": ["XS", "S", "M", "XL", "XXL"],
        "gender": "men",
        "tags": ["jacket"],
        "images": ["1740507-00-A_0_2000.jpg", "1740507-00-A_1.jpg"],
    },
    {
        "title": "Women's Cropped Puffer Jacket",
        "description": "Cropped puffer jacket with an ultra-soft lining.",
        "price": 225,
        "stock": 85,
        "sizes": ["XS", "S", "M"],
        "gender": "women",
        "tags": ["hoodie"],
        "images": ["1740535-00-A_0_2000.jpg"],
    },
    {
        "title": "Kids Cybertruck Long Sleeve Tee",
        "description": "Long sleeve tee in organic cotton with a screen printed graphic.",
        "price": 30,
        "stock": 10,
        "sizes": ["XS", "S", "M"],
        "gender": "kid",
        "tags": ["shirt"],
        "images": ["1742694-00-A_1_2000.jpg", "1742694-00-A_3.jpg"],
    },
    {
        "title": "Unisex Wordmark Cap",
        "description": "Six panel cap with an embroidered wordmark.",
        "price": 30,
        "stock": 24,
        "sizes": [],
        "gender": "unisex",
        "tags": ["hat"],
        "images": [],
    },
]
