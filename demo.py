#!/usr/bin/env python
from sdk.pystore import ProductClient


def main():
    c = ProductClient(base_url="http://127.0.0.1:3000")

    print(c.root())

    # -----------------------------
    # Browse the seeded catalog
    # -----------------------------
    print("\nListing products...")
    print(c.list_products())

    print("\nKitchen products...")
    print(c.list_products(category="kitchen"))

    print("\nSearching for 'lap'...")
    print(c.search_products("lap"))

    print("\nCategory stats...")
    print(c.get_stats())

    # -----------------------------
    # Create, update, delete
    # -----------------------------
    print("\nCreating a product...")
    created = c.create_product("Desk Lamp", "LED lamp with dimmer", 35, "home")
    print(created)

    print("\nUpdating its price...")
    print(c.update_product(created["id"], price=29.99))

    print("\nDeleting it...")
    c.delete_product(created["id"])
    print(c.list_products())


if __name__ == "__main__":
    main()
