"""
Progression layer: persisted profile and upgrade shop.
"""

from .profile import PlayerProfile
from .store import ProfileStore
from .shop import Upgrade, UPGRADES, purchase, can_purchase, available_upgrades, get_upgrade

__all__ = [
    'PlayerProfile',
    'ProfileStore',
    'Upgrade',
    'UPGRADES',
    'purchase',
    'can_purchase',
    'available_upgrades',
    'get_upgrade',
]
