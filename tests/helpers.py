"""Scripted random source for pinning spawned tiles in tests."""


class ScriptedRandom:
    """
    Stand-in for a numpy Generator returning pre-set draws.

    ``picks`` are the indices returned by ``integers`` (position among empty cells) and ``draws`` the
    floats returned by ``random`` (below 0.9 spawns a 2, otherwise a 4).
    """

    def __init__(self, picks, draws):
        self.picks = list(picks)
        self.draws = list(draws)

    def integers(self, high):
        pick = self.picks.pop(0)
        assert 0 <= pick < high
        return pick

    def random(self):
        return self.draws.pop(0)
