"""Transactions API HTTP client for fetching a user's recent transactions"""

import httpx
from datetime import date
from typing import List
from goal_optimizer.domain.models import Transaction
from goal_optimizer.domain.exceptions import TransactionsAPIError
from goal_optimizer.config import settings


class TransactionsClient:
    """Client for the external, already-classified transactions API"""

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = base_url or settings.transactions_api_base
        self.timeout = timeout or settings.http_timeout_seconds

    async def get_transactions(self, user_id: str) -> List[Transaction]:
        """
        Fetch recent classified transactions for a user.

        Raises:
            TransactionsAPIError: On timeout, HTTP errors, or invalid response
        """
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.get(
                    f"{self.base_url}/transactions",
                    params={"user_id": user_id},
                )
                response.raise_for_status()
                data = response.json()

                return [
                    Transaction(
                        transaction_id=str(txn["transaction_id"]),
                        date=date.fromisoformat(txn["date"]),
                        amount=float(txn["amount"]),
                        type=txn["type"],
                        description=txn.get("description", ""),
                        category=txn.get("category", ""),
                    )
                    for txn in data.get("transactions", [])
                ]

            except httpx.TimeoutException as e:
                raise TransactionsAPIError(f"Transactions API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise TransactionsAPIError(f"Transactions API error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise TransactionsAPIError(f"Transactions API unreachable: {e}") from e
            except (KeyError, ValueError, TypeError) as e:
                raise TransactionsAPIError(f"Invalid transaction data from API: {e}") from e
