"""
Identity entries describing the hosting system.
Seeded into every new KnowledgeStore; they are ordinary entries and may be overwritten.
"""

from typing import Dict

from .config import Config


def get_system_entries() -> Dict[str, str]:
    """Returns the seed entries built from the current brain config."""
    brain = Config.brain
    return {
        "system.name": brain.SYSTEM_NAME,
        "system.version": brain.SYSTEM_VERSION,
        "system.type": brain.SYSTEM_TYPE,
        "system.layer": brain.SYSTEM_LAYER,
    }
