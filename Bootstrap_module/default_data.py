"""
Baseline catalog, cart and order records loaded into an empty store.

Each dataset is an ordered tuple of attribute templates for its model.
Timestamps are not part of the templates; they are stamped at insert time.
"""

DEFAULT_PRODUCTS = (
    {
        "id": "e43638ce-6aa0-4b85-b27f-e1d07eb678c6",
        "image": "images/products/athletic-cotton-socks-6-pairs.jpg",
        "name": "Black and Gray Athletic Cotton Socks - 6 Pairs",
        "rating": {"stars": 4.5, "count": 87},
        "price_cents": 1090,
        "keywords": ["socks", "sports", "apparel"],
    },
    {
        "id": "15b6fc6f-327a-4ec4-896f-486349e85a3d",
        "image": "images/products/intermediate-composite-basketball.jpg",
        "name": "Intermediate Size Basketball",
        "rating": {"stars": 4.0, "count": 127},
        "price_cents": 2095,
        "keywords": ["sports", "basketballs"],
    },
    {
        "id": "83d4ca15-0f35-48f5-b7a3-1ea210004f2e",
        "image": "images/products/adults-plain-cotton-tshirt-2-pack-teal.jpg",
        "name": "Adults Plain Cotton T-Shirt - 2 Pack",
        "rating": {"stars": 4.5, "count": 56},
        "price_cents": 799,
        "keywords": ["tshirts", "apparel", "mens"],
    },
    {
        "id": "54e0eccd-8f36-462b-b68a-8182611d9add",
        "image": "images/products/black-2-slot-toaster.jpg",
        "name": "2 Slot Toaster - Black",
        "rating": {"stars": 5.0, "count": 2197},
        "price_cents": 1899,
        "keywords": ["toaster", "kitchen", "appliances"],
    },
    {
        "id": "3ebe75dc-64d2-4137-8860-1f5a963e534b",
        "image": "images/products/6-piece-white-dinner-plate-set.jpg",
        "name": "6 Piece White Dinner Plate Set",
        "rating": {"stars": 4.0, "count": 37},
        "price_cents": 2067,
        "keywords": ["plates", "kitchen", "dining"],
    },
    {
        "id": "8c9c52b5-5a19-4bcb-a5d1-158a74287c53",
        "image": "images/products/6-piece-non-stick-baking-set.webp",
        "name": "6-Piece Nonstick, Carbon Steel Oven Bakeware Baking Set",
        "rating": {"stars": 4.5, "count": 175},
        "price_cents": 3499,
        "keywords": ["kitchen", "cookware"],
    },
    {
        "id": "dd82ca78-a18b-4e2a-9250-31e67412f98d",
        "image": "images/products/plain-hooded-fleece-sweatshirt-yellow.jpg",
        "name": "Plain Hooded Fleece Sweatshirt",
        "rating": {"stars": 4.5, "count": 317},
        "price_cents": 2400,
        "keywords": ["hoodies", "sweaters", "apparel"],
    },
    {
        "id": "77919bbe-0e56-475b-adde-4f24dfed3a04",
        "image": "images/products/luxury-tower-set-6-piece.jpg",
        "name": "Luxury Towel Set - Graphite Gray",
        "rating": {"stars": 4.5, "count": 144},
        "price_cents": 3599,
        "keywords": ["bathroom", "washroom", "restroom", "towels", "bath towels"],
    },
    {
        "id": "3fdfe8d6-9a15-4979-b459-585b0d0545b9",
        "image": "images/products/liquid-laundry-detergent-plain.jpg",
        "name": "Liquid Laundry Detergent, 110 Loads, 82.5 Fl Oz",
        "rating": {"stars": 4.5, "count": 305},
        "price_cents": 2899,
        "keywords": ["bathroom", "cleaning"],
    },
    {
        "id": "58b4fc92-e98c-42aa-8c55-b6b79996769a",
        "image": "images/products/knit-athletic-sneakers-gray.jpg",
        "name": "Waterproof Knit Athletic Sneakers - Gray",
        "rating": {"stars": 4.0, "count": 89},
        "price_cents": 3390,
        "keywords": ["shoes", "running shoes", "footwear"],
    },
    {
        "id": "5968897c-4d27-4872-89f6-5bcb052746d7",
        "image": "images/products/women-chiffon-beachwear-coverup-black.jpg",
        "name": "Women's Chiffon Beachwear Cover Up - Black",
        "rating": {"stars": 4.5, "count": 235},
        "price_cents": 2070,
        "keywords": ["robe", "swimsuit", "swimming", "bathing", "apparel"],
    },
    {
        "id": "aad29d11-ea98-41ee-9285-b916638cac4a",
        "image": "images/products/round-sunglasses-black.jpg",
        "name": "Round Sunglasses",
        "rating": {"stars": 4.5, "count": 30},
        "price_cents": 1560,
        "keywords": ["accessories", "shades"],
    },
)

DEFAULT_DELIVERY_OPTIONS = (
    {"id": "1", "delivery_days": 7, "price_cents": 0},
    {"id": "2", "delivery_days": 3, "price_cents": 499},
    {"id": "3", "delivery_days": 1, "price_cents": 999},
)

DEFAULT_CART = (
    {
        "product_id": "e43638ce-6aa0-4b85-b27f-e1d07eb678c6",
        "quantity": 2,
        "delivery_option_id": "1",
    },
    {
        "product_id": "15b6fc6f-327a-4ec4-896f-486349e85a3d",
        "quantity": 1,
        "delivery_option_id": "2",
    },
)

DEFAULT_ORDERS = (
    {
        "id": "27cba69d-4c3d-4098-b42d-ac7fa62b7664",
        "order_time_ms": 1723456800000,
        "total_cost_cents": 3506,
        "products": [
            {
                "productId": "e43638ce-6aa0-4b85-b27f-e1d07eb678c6",
                "quantity": 1,
                "estimatedDeliveryTimeMs": 1724061600000,
            },
            {
                "productId": "83d4ca15-0f35-48f5-b7a3-1ea210004f2e",
                "quantity": 2,
                "estimatedDeliveryTimeMs": 1723716000000,
            },
        ],
    },
    {
        "id": "b6b6c212-d30e-4d4a-805d-90b52ce6b37d",
        "order_time_ms": 1718013600000,
        "total_cost_cents": 4611,
        "products": [
            {
                "productId": "15b6fc6f-327a-4ec4-896f-486349e85a3d",
                "quantity": 2,
                "estimatedDeliveryTimeMs": 1718618400000,
            },
        ],
    },
)
