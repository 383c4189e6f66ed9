"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field

# Type aliases to make GameModel easier to read
ActionRecord = dict[str, str]


@dataclass
class GameModel:
    """Transport-safe representation of a board game used between API, Service, DB, and rule engine layers.

    * layout: board in layout notation, ex. "wwww/4/4/bbbb"
    * standby: name of the color expected to move next ("black" / "white")
    * actions: the action log, every entry has the keys kind, chess_type, source, target
    """

    layout: str
    standby: str
    actions: list[ActionRecord] = field(default_factory=list)
