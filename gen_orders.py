import json
import random
import argparse

# --------------------------------------------------------------------------------------------------------------------------------------
# Helpers
# --------------------------------------------------------------------------------------------------------------------------------------
ORDER_NAME = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Suspendisse a risus scelerisque, interdum orci ac, "
    "malesuada odio. Cras lacinia ante sit amet risus rutrum fringilla. Nulla ligula felis, aliquet consectetur "
    "interdum nec, sagittis ut lacus. Suspendisse potenti. Curabitur in lectus nunc. Ut mollis efficitur leo, eget "
    "congue justo. Pellentesque habitant morbi tristique senectus et netus et malesuada fames ac turpis egestas. "
    "Integer faucibus, libero in porta convallis, eros erat commodo diam, sed fermentum sapien nulla vel tortor. "
    "Duis consectetur mauris auctor, imperdiet nisl et, feugiat enim. Fusce ac enim eu turpis blandit interdum. "
    "Suspendisse ultrices tortor nunc, ac volutpat felis porttitor vitae. Vivamus venenatis, turpis et fringilla "
    "iaculis, velit diam bibendum felis, at mollis urna nisi tincidunt dolor. Fusce tincidunt pulvinar viverra."
)

ORDER_ID_LIMIT = 1_000_000
LOOKUP_ID_LIMIT = 100_000
TRANSPORT_ID_LIMIT = 100_000

# The orders service inserts this shape of test data on an empty store
SEED_NAME = "TestOrder"
SEED_TRANSPORT_ID = 2


def random_order_id():
    return random.randrange(ORDER_ID_LIMIT)

def random_transport_id():
    return random.randrange(TRANSPORT_ID_LIMIT)

def lookup_order_id():
    # Lookups only cover the low end of the id space, so most of them miss
    return random.randrange(LOOKUP_ID_LIMIT)

def order_path(order_id=None):
    if order_id is None:
        order_id = lookup_order_id()
    return f"/orders/{int(order_id)}"

def generate_order():
    return {
        "order_id": random_order_id(),
        "name": ORDER_NAME,
        "transport_id": random_transport_id(),
    }

def seed_order(index):
    return {
        "order_id": index,
        "name": SEED_NAME,
        "transport_id": SEED_TRANSPORT_ID,
    }

# --------------------------------------------------------------------------------------------------------------------------------------
# Invalid Data Injection
# --------------------------------------------------------------------------------------------------------------------------------------
INVALID_CHOICES = ["order_id", "order_id_type", "name", "transport_id"]


def inject_invalid_data(order):
    choice = random.choice(INVALID_CHOICES)

    if choice == "order_id":
        order["order_id"] = -1  # ids are unsigned
    elif choice == "order_id_type":
        order["order_id"] = "abc"  # not numeric
    elif choice == "name":
        order.pop("name", None)  # required field
    elif choice == "transport_id":
        order["transport_id"] = "not-a-number"

    return order

def generate_orders(num_orders, invalid_rate=0.0):
    orders = []
    for _ in range(num_orders):
        order = generate_order()
        if random.random() < invalid_rate:
            order = inject_invalid_data(order)
        orders.append(order)
    return orders

# --------------------------------------------------------------------------------------------------------------------------------------
# Script w/ flags
# --------------------------------------------------------------------------------------------------------------------------------------
# 100% valid orders:
# python gen_orders.py -n 50 --invalid-rate 0.0 -o mock.json

# 80%  valid orders:                    ↓ this flag == 20% invalid
# python gen_orders.py -n 50 --invalid-rate 0.2 -o mock.json
def build_parser():
    parser = argparse.ArgumentParser(description="Generate mock orders JSON (valid + invalid).")
    parser.add_argument("-n", "--num-orders", type=int, default=100, help="Number of orders to generate")
    parser.add_argument("--invalid-rate", type=float, default=0.0, help="Fraction of orders to make invalid (0.0–1.0)")
    parser.add_argument("-o", "--output", default="mock_orders.json", help="Output file name")
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.num_orders < 0:
        parser.error("--num-orders must not be negative")
    if not 0.0 <= args.invalid_rate <= 1.0:
        parser.error("--invalid-rate must be between 0.0 and 1.0")

    orders = generate_orders(args.num_orders, args.invalid_rate)

    with open(args.output, "w") as f:
        json.dump(orders, f, indent=3)

    print(f"Generated {args.num_orders} orders ({args.invalid_rate*100:.0f}% invalid) into {args.output}")
    return orders


if __name__ == "__main__":
    main()
