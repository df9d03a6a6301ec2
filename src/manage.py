"""FashionExpress management CLI.

Usage:
    python src/manage.py setup-db                          # Create all tables
    python src/manage.py drop-db                           # Drop all tables
    python src/manage.py seed                              # Load the starter catalogue
    python src/manage.py update-order-status ID "Shipped"  # Append a tracking entry
    python src/manage.py restock ID 25                     # Adjust a product's stock
    python src/manage.py purge-sessions                    # Delete expired login sessions
"""

import argparse
import sys


def _domain():
    from fashionexpress.domain import fashionexpress

    print("Initializing fashionexpress domain...")
    fashionexpress.init()
    return fashionexpress


def setup_database():
    from fashionexpress.utils.db import setup_db

    domain = _domain()
    print("Creating database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    from fashionexpress.utils.db import drop_db

    domain = _domain()
    print("Dropping database schema...")
    drop_db(domain)
    print("Done.")


def seed():
    from fashionexpress.seed import seed_catalogue

    with _domain().domain_context():
        created = seed_catalogue()
    print(f"Seeded {created} products.")


def update_order_status(order_id, status, description=None):
    from fashionexpress.order.tracking import append_status

    with _domain().domain_context():
        entry = append_status(order_id, status, description)
    print(f"Order {order_id}: {entry.status} at {entry.timestamp.isoformat()}")


def restock(product_id, delta):
    from fashionexpress.product.stock import restock as restock_product

    with _domain().domain_context():
        stock = restock_product(product_id, delta)
    print(f"Product {product_id}: stock is now {stock}")


def purge_sessions():
    from fashionexpress.session.auth import purge_expired_sessions

    with _domain().domain_context():
        purged = purge_expired_sessions()
    print(f"Purged {purged} expired sessions.")


def main():
    parser = argparse.ArgumentParser(description="FashionExpress management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Load the starter categories and products")

    status_parser = subparsers.add_parser("update-order-status", help="Append a tracking entry to an order")
    status_parser.add_argument("order_id")
    status_parser.add_argument("status", help="e.g. Processing, Shipped, Out for Delivery, Delivered")
    status_parser.add_argument("--description", default=None)

    restock_parser = subparsers.add_parser("restock", help="Add (or with a negative delta, remove) stock")
    restock_parser.add_argument("product_id")
    restock_parser.add_argument("delta", type=int)

    subparsers.add_parser("purge-sessions", help="Delete expired login sessions")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed()
    elif args.command == "update-order-status":
        update_order_status(args.order_id, args.status, args.description)
    elif args.command == "restock":
        restock(args.product_id, args.delta)
    elif args.command == "purge-sessions":
        purge_sessions()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
