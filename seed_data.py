from decimal import Decimal
from sqlmodel import Session, select
from app.db.session import engine, create_db_and_tables
from app.models.product import Product

def seed_products():
    print("Creating database and tables...")
    create_db_and_tables()

    with Session(engine) as session:
        # Check if products already exist to avoid duplicates
        existing_products = session.exec(select(Product)).all()
        if existing_products:
            print(f"Database already contains {len(existing_products)} products. Skipping seed.")
            return

        print("Seeding initial products...")
        products = [
            Product(
                title="Half plot, Lekki Phase 2",
                description="Dry land with approved survey, close to the expressway.",
                price=Decimal("12500000"),
                category="land",
            ),
            Product(
                title="3 bedroom terrace duplex",
                description="Fully serviced estate with 24 hour power and security.",
                price=Decimal("85000000"),
                category="properties",
            ),
            Product(
                title="Velvet three-seater sofa",
                description="Deep seats, solid hardwood frame.",
                price=Decimal("650000"),
                category="furnitures",
                sub_category="home",
            ),
            Product(
                title="Executive office desk",
                description="Walnut finish with cable management.",
                price=Decimal("420000"),
                category="furnitures",
                sub_category="office",
            ),
            Product(
                title="Toyota Camry 2018",
                description="Foreign used, clean title, low mileage.",
                price=Decimal("14800000"),
                category="auto",
                image_url="https://images.example.com/camry-2018.jpg",
            ),
        ]

        for product in products:
            session.add(product)

        session.commit()
        print(f"Successfully seeded {len(products)} products!")

if __name__ == "__main__":
    seed_products()
