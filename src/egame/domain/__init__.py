"""Rules engine for the egame world.

Every rule is a plain function operating on an in-memory :class:`World`
(see :mod:`models`) for a given block.  Nothing in this package performs I/O;
loading and persisting the world is left to :mod:`egame.repository` and the
service layer in :mod:`egame.api.runtime`.
"""

from . import battle, economy, enums, errors, fleet, models, rules_config

__all__ = [
    "battle",
    "economy",
    "enums",
    "errors",
    "fleet",
    "models",
    "rules_config",
]
