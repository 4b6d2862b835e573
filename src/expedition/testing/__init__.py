"""Testing helpers for the expedition simulation.

- ScriptedRandom: a RandomSource that replays fixed draws, so scenario tests
  can pin the weather, shuffles and discoveries exactly
"""

from expedition.testing.scripted import ScriptExhaustedError, ScriptedRandom

__all__ = ["ScriptExhaustedError", "ScriptedRandom"]
