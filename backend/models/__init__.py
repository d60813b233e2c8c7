from models.channel import LineupChannel
from models.lineup import Lineup

__all__ = ["Lineup", "LineupChannel"]
