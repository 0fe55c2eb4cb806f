from .registry import GameRegistry, game_registry
from .solution_xml import solution_to_xml

__all__ = ["GameRegistry", "game_registry", "solution_to_xml"]
