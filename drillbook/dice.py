"""A dice race: players roll in turns until one passes the win limit."""

import argparse
import sys

from drillbook.randutil import bounded_rand


class DiceGame:
    """Players add rolls to their totals; every other turn the rolls count negative."""

    def __init__(self, players=2, win_limit=50, draw_limit=100, face_range=5, rng=None):
        if players < 1:
            raise ValueError("there must be at least one player")
        if face_range < 1:
            raise ValueError("face range must be positive")
        self.players = players
        self.win_limit = win_limit
        self.draw_limit = draw_limit
        self.face_range = face_range
        self.totals = [0] * players
        self._rng = rng
        self._sign = 1
        self._winner = 0

    def next_turn(self):
        """Roll once for every player and return the turn's description."""
        parts = []
        for index in range(self.players):
            value = bounded_rand(self.face_range, self._rng) * self._sign
            self.totals[index] += value
            number = index + 1
            parts.append(
                f"[P{number:1}: {value:4} - Total: {self.totals[index]:4} ] "
            )
            if self.totals[index] > self.win_limit:
                self._winner = number
        self._sign = -self._sign
        return "".join(parts)

    def play(self, stream=None):
        """Play turns until someone wins or the draw limit passes.

        Returns the winning player's number, or ``None`` on a draw.
        """
        out = sys.stdout if stream is None else stream
        turn = 0
        while not self._winner:
            out.write(f"Turn:{turn:3} {self.next_turn()}\n")
            turn += 1
            if turn > self.draw_limit:
                out.write("\nDraw!")
                return None
        winner = self._winner
        out.write(f"\nPlayer {winner} wins!\n")
        self._winner = 0
        return winner


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play a dice race.")
    parser.add_argument("--players", type=int, default=2)
    parser.add_argument("--win-limit", type=int, default=50)
    parser.add_argument("--draw-limit", type=int, default=100)
    parser.add_argument("--range", dest="face_range", type=int, default=5)
    args = parser.parse_args(argv)

    game = DiceGame(args.players, args.win_limit, args.draw_limit, args.face_range)
    game.play(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())