"""Gold economy operations."""

from dataclasses import dataclass


@dataclass
class EconomySystem:
    gold: int

    def can_afford(self, amount: int) -> bool:
        return self.gold >= amount

    def spend(self, amount: int) -> bool:
        if amount < 0:
            raise ValueError("amount must be non-negative")
        if self.gold < amount:
            return False
        self.gold -= amount
        return True

    def reward(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("amount must be non-negative")
        self.gold += amount
