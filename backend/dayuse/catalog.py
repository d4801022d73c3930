"""
Static catalog data: default age-tier pricing and the example property list.

The property list is not part of the booking flow; it is the context the chat
relay hands to the assistant and is served read-only to the front end.
"""

from decimal import Decimal

from dayuse.models.site import AgeTier

DEFAULT_GLOBAL_LIMIT = 50


def default_age_tiers() -> list[AgeTier]:
    """Fresh copies of the launch pricing, so admin edits never leak between stores."""
    return [
        AgeTier(id="t1", label="0 a 5 anos", min_age=0, max_age=5, price=Decimal("0")),
        AgeTier(id="t2", label="6 a 10 anos", min_age=6, max_age=10, price=Decimal("8")),
        AgeTier(id="t3", label="Acima de 11 anos", min_age=11, max_age=None, price=Decimal("15")),
    ]


PROPERTIES: list[dict] = [
    {
        "id": "1",
        "name": "Azure Horizon Villa",
        "description": "A stunning cliffside villa with panoramic ocean views and a private infinity pool.",
        "location": "Santorini, Grécia",
        "price_per_night": 850,
        "rating": 4.9,
        "reviews": 128,
        "images": ["https://picsum.photos/id/1015/800/600", "https://picsum.photos/id/1016/800/600"],
        "amenities": ["Piscina Infinita", "Wi-Fi", "Chef Privado", "Vista Mar"],
        "type": "Villa",
        "coordinates": {"lat": 36.3932, "lng": 25.4615},
    },
    {
        "id": "2",
        "name": "Metropolitan Loft",
        "description": "Modern and sleek industrial loft in the heart of Manhattan.",
        "location": "Nova York, EUA",
        "price_per_night": 420,
        "rating": 4.7,
        "reviews": 245,
        "images": ["https://picsum.photos/id/1018/800/600", "https://picsum.photos/id/1019/800/600"],
        "amenities": ["Ginásio", "Concierge 24/7", "Smart Home", "Terraço"],
        "type": "Apartment",
        "coordinates": {"lat": 40.7128, "lng": -74.0060},
    },
    {
        "id": "3",
        "name": "Alpine Zen Retreat",
        "description": "Luxury wooden cabin nestled in the Swiss Alps with private spa facilities.",
        "location": "Zermatt, Suíça",
        "price_per_night": 650,
        "rating": 4.95,
        "reviews": 89,
        "images": ["https://picsum.photos/id/1020/800/600", "https://picsum.photos/id/1021/800/600"],
        "amenities": ["Lareira", "Sauna", "Ski-in/Ski-out", "Jacuzzi"],
        "type": "Cabin",
        "coordinates": {"lat": 46.0207, "lng": 7.7491},
    },
    {
        "id": "4",
        "name": "The Royal Palms Resort",
        "description": "Exotic beachfront resort with world-class dining and spa services.",
        "location": "Bora Bora, Polinésia Francesa",
        "price_per_night": 1200,
        "rating": 5.0,
        "reviews": 56,
        "images": ["https://picsum.photos/id/1022/800/600", "https://picsum.photos/id/1023/800/600"],
        "amenities": ["Spa", "Praia Privada", "Mergulho", "Butler"],
        "type": "Hotel",
        "coordinates": {"lat": -16.5004, "lng": -151.7415},
    },
    {
        "id": "5",
        "name": "Kyoto Heritage Inn",
        "description": "Traditional Japanese ryokan with modern luxury touches and serene gardens.",
        "location": "Kyoto, Japão",
        "price_per_night": 550,
        "rating": 4.85,
        "reviews": 112,
        "images": ["https://picsum.photos/id/1024/800/600", "https://picsum.photos/id/1025/800/600"],
        "amenities": ["Onsen", "Cerimônia do Chá", "Jardim Zen", "Yukata"],
        "type": "Hotel",
        "coordinates": {"lat": 35.0116, "lng": 135.7681},
    },
    {
        "id": "6",
        "name": "Desert Mirage Oasis",
        "description": "Modernist villa in the high desert with spectacular sunset views.",
        "location": "Joshua Tree, EUA",
        "price_per_night": 380,
        "rating": 4.6,
        "reviews": 94,
        "images": ["https://picsum.photos/id/1026/800/600", "https://picsum.photos/id/1027/800/600"],
        "amenities": ["Fogueira", "Telescópio", "Design Minimalista", "Solar"],
        "type": "Villa",
        "coordinates": {"lat": 34.1333, "lng": -116.3131},
    },
]
