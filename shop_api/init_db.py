import argparse
import logging

from shop_api.config import get_settings
from shop_api.database import Database
from shop_api.db.models import Product, Store, User
from shop_api.logging_config import setup_logging

logger = logging.getLogger(__name__)


def seed(database: Database):
    db = database.SessionLocal()
    try:
        if not db.query(User).first():
            owner = User(name="Demo Owner", email="owner@example.com")
            store = Store(name="Demo Store", user=owner)
            db.add_all([owner, store, Product(name="Demo Product", price=9.9, store=store)])
            db.commit()
            logger.info("Seed data added")
        else:
            logger.info("Users already present, skipping seed")
    finally:
        db.close()


def init(database: Database, with_seed: bool = False):
    database.create_tables = True
    database.init()
    if with_seed:
        seed(database)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create the database tables")
    parser.add_argument("--seed", action="store_true", help="insert a demo user, store and product")
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    database = Database(settings.DATABASE_URL)
    try:
        init(database, with_seed=args.seed)
    finally:
        database.shutdown()


if __name__ == "__main__":
    main()
