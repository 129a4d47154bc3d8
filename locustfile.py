"""
Load profile for the gateway's read endpoints.

Run: locust -f locustfile.py --host http://localhost:3001
Addresses come from wallets.csv (column "wallet") when present.
"""

import csv
import os
import random

from locust import HttpUser, between, task

WALLETS_CSV = os.getenv("WALLETS_CSV", "wallets.csv")

wallets = []
if os.path.exists(WALLETS_CSV):
    with open(WALLETS_CSV) as f:
        for row in csv.DictReader(f):
            wallets.append(row["wallet"])
if not wallets:
    wallets = ["0x" + "%064x" % i for i in range(1, 51)]


class OdysseyGatewayUser(HttpUser):
    wait_time = between(1, 2)

    @task(3)
    def odyssey_and_stage(self):
        self.client.get("/api/get-odyssey")
        self.client.get("/api/get-stage")

    @task(5)
    def balances(self):
        wallet = random.choice(wallets)
        self.client.get(f"/api/allowlist-balance/{wallet}", name="/api/allowlist-balance/[address]")
        self.client.get(f"/api/publiclist-balance/{wallet}", name="/api/publiclist-balance/[address]")

    @task(1)
    def mint_payloads(self):
        wallet = random.choice(wallets)
        self.client.get(f"/api/get-mint-txn/{wallet}/1", name="/api/get-mint-txn/[address]/[qty]")
