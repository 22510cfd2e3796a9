import argparse
import json
import time

import requests

from gen_orders import generate_order, order_path, seed_order
from scenarios import BASE_URL

HEADERS = {"Content-Type": "application/json"}
TIMEOUT = 5


def send_orders(count, base_url=BASE_URL, session=None, seed=False, delay=0.0):
    if session is None:
        with requests.Session() as session:
            return send_orders(count, base_url, session, seed, delay)

    url = f"{base_url.rstrip('/')}/orders"
    stats = {"sent": 0, "ok": 0, "failed": 0}

    for i in range(count):
        payload = seed_order(i) if seed else generate_order()

        print(f"\nSending Order {i+1}:")
        print(json.dumps(payload, indent=2))

        stats["sent"] += 1
        try:
            response = session.post(url, data=json.dumps(payload), headers=HEADERS, timeout=TIMEOUT)
            print("Response:", response.status_code, response.text)
            if 200 <= response.status_code < 300:
                stats["ok"] += 1
            else:
                stats["failed"] += 1
        except requests.RequestException as e:
            print("Error sending request:", e)
            stats["failed"] += 1

        if delay:
            time.sleep(delay)

    return stats


def fetch_order(order_id, base_url=BASE_URL, session=None):
    if session is None:
        with requests.Session() as session:
            return fetch_order(order_id, base_url, session)

    return session.get(f"{base_url.rstrip('/')}{order_path(order_id)}", timeout=TIMEOUT)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Send orders to the orders service.")
    parser.add_argument("-n", "--num-orders", type=int, default=10, help="Number of orders to send")
    parser.add_argument("--seed", action="store_true", help="Send deterministic test orders 0..n-1 instead of random ones")
    parser.add_argument("--url", default=BASE_URL, help="Orders service base URL")
    parser.add_argument("--delay", type=float, default=0.2, help="Seconds to wait between orders")
    args = parser.parse_args(argv)
    if args.num_orders < 0:
        parser.error("--num-orders must not be negative")

    stats = send_orders(args.num_orders, args.url, seed=args.seed, delay=args.delay)
    print(f"\nSent {stats['sent']} orders: {stats['ok']} ok, {stats['failed']} failed")
    return stats


if __name__ == "__main__":
    main()
