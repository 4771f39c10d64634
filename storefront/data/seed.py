# storefront/data/seed.py
from decimal import Decimal

from storefront.data.database import Base, SessionLocal, engine
from storefront.data.models import ProductModel
from storefront.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

PRODUCTS = [
    {
        "name": "Shake Weight",
        "price": Decimal("29.99"),
        "image": "/images/shake-weight.jpg",
        "short_description": "Dynamic inertia dumbbell for toned arms.",
        "long_description": "A spring-loaded dumbbell that turns every shake into a workout.",
    },
    {
        "name": "ShamWow",
        "price": Decimal("26.95"),
        "image": "/images/shamwow.jpg",
        "short_description": "It's like a chamois, towel and sponge in one.",
        "long_description": "Holds twelve times its weight in liquid and wrings out clean.",
    },
    {
        "name": "Snuggie",
        "price": Decimal("19.99"),
        "image": "/images/snuggie.jpg",
        "short_description": "The blanket with sleeves.",
        "long_description": "Stay warm and keep your hands free for the remote.",
    },
    {
        "name": "Wax Vac",
        "price": Decimal("9.99"),
        "image": "/images/wax-vac.jpg",
        "short_description": "Gentle ear cleaning with soft suction.",
        "long_description": "Battery powered suction with interchangeable soft tips.",
    },
    {
        "name": "Ostrich Pillow",
        "price": Decimal("99.99"),
        "image": "/images/ostrich-pillow.jpg",
        "short_description": "Create your own snugly space in the world.",
        "long_description": "A padded hood for power naps at the desk, on the train or anywhere.",
    },
    {
        "name": "Tater Mitts",
        "price": Decimal("8.30"),
        "image": "/images/tater-mitts.jpg",
        "short_description": "Scrub and peel potatoes with your hands.",
        "long_description": "Textured gloves that take the skin off in seconds.",
    },
]


def seed():
    db = SessionLocal()
    try:
        # only seed an empty catalog
        if db.query(ProductModel).first():
            logger.info("Catalog already seeded")
            return
        db.add_all(ProductModel(**p) for p in PRODUCTS)
        db.commit()
        logger.info(f"Seeded {len(PRODUCTS)} products")
    finally:
        db.close()


if __name__ == "__main__":
    setup_logging()
    Base.metadata.create_all(bind=engine)
    seed()
