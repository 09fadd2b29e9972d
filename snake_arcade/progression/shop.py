"""
Upgrade shop - spend currency to unlock capabilities.
"""
from dataclasses import dataclass
from typing import List, Optional

from ..game.capabilities import (
    SECOND_FOOD_CHANCE,
    PORTAL_WALLS,
    UNCOMMON_FOOD,
    RARE_FOOD,
    EPIC_FOOD,
    MAX_DIFFICULTY,
)
from .profile import PlayerProfile


@dataclass(frozen=True)
class Upgrade:
    """A purchasable upgrade."""
    id: str
    name: str
    cost: int
    description: str
    requires: Optional[str] = None


UPGRADES: List[Upgrade] = [
    Upgrade(UNCOMMON_FOOD, "Uncommon Food", 25, "Food may spawn as uncommon (worth 2)"),
    Upgrade(RARE_FOOD, "Rare Food", 75, "Food may spawn as rare (worth 5)", requires=UNCOMMON_FOOD),
    Upgrade(EPIC_FOOD, "Epic Food", 200, "Food may spawn as epic (worth 10)", requires=RARE_FOOD),
    Upgrade(SECOND_FOOD_CHANCE, "Second Helping", 100, "Eating may spawn a bonus food"),
    Upgrade(PORTAL_WALLS, "Portal Walls", 300, "Leave one edge, enter from the opposite one"),
    Upgrade(MAX_DIFFICULTY, "Insane Mode", 150, "Unlocks the hardest difficulty (double currency)"),
]


def get_upgrade(upgrade_id: str) -> Upgrade:
    """
    Look up an upgrade by id.

    Raises:
        ValueError: If the id is not in the catalog
    """
    for upgrade in UPGRADES:
        if upgrade.id == upgrade_id:
            return upgrade
    raise ValueError(f"Unknown upgrade: {upgrade_id}")


def can_purchase(profile: PlayerProfile, upgrade_id: str) -> bool:
    """True if the upgrade is not owned, its prerequisite is, and it is affordable."""
    upgrade = get_upgrade(upgrade_id)
    if profile.has_upgrade(upgrade.id):
        return False
    if upgrade.requires is not None and not profile.has_upgrade(upgrade.requires):
        return False
    return profile.currency >= upgrade.cost


def purchase(profile: PlayerProfile, upgrade_id: str) -> bool:
    """
    Buy an upgrade, deducting its cost.

    Args:
        profile: Profile to charge and unlock on
        upgrade_id: Upgrade to buy

    Returns:
        True if the upgrade was bought

    Raises:
        ValueError: If the id is not in the catalog
    """
    if not can_purchase(profile, upgrade_id):
        return False

    upgrade = get_upgrade(upgrade_id)
    profile.currency -= upgrade.cost
    profile.unlocked_upgrades.add(upgrade.id)
    print(f"[Shop] Bought {upgrade.name} for {upgrade.cost} (left: {profile.currency})")
    return True


def available_upgrades(profile: PlayerProfile) -> List[Upgrade]:
    """Upgrades the profile does not own yet, in catalog order."""
    return [u for u in UPGRADES if not profile.has_upgrade(u.id)]
