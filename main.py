import argparse
import logging

from go_config import DEFAULT_BOARD_SIZE, DEFAULT_KOMI, LOG_FORMAT
from go_game import GoGame
from go_scoring import ScoringMethod


def parse_move(text):
    """Parse ``"r c"`` (1-based), ``"p"`` or ``"r"`` into a 0-based command."""
    text = text.strip().lower()
    if text == "p":
        return ("pass",)
    if text == "r":
        return ("resign",)
    parts = text.split()
    if len(parts) != 2:
        raise ValueError(f"Expected 'r c', 'p' or 'r', got {text!r}")
    r, c = map(int, parts)
    return ("move", r - 1, c - 1)


def main():
    parser = argparse.ArgumentParser(description="Two-player Go on the console")
    parser.add_argument("--size", type=int, default=DEFAULT_BOARD_SIZE, help="Board size")
    parser.add_argument("--handicap", type=int, default=0, help="Handicap stones for Black")
    parser.add_argument("--komi", type=float, default=DEFAULT_KOMI, help="Komi for White")
    parser.add_argument("--method", choices=[m.value for m in ScoringMethod],
                        default=ScoringMethod.AREA.value, help="Scoring method")
    parser.add_argument("--sgf", type=str, default=None, help="Write the game record to this SGF file")
    parser.add_argument("--verbose", action="store_true", help="Log engine decisions")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format=LOG_FORMAT)

    game = GoGame(size=args.size, handicap=args.handicap, komi=args.komi,
                  method=ScoringMethod(args.method))

    print("Welcome to Go!")
    print("Black is X, White is O.")

    while not game.is_over():
        print("\nCurrent board:")
        print(game)

        name = "Black" if game.current_player == GoGame.BLACK else "White"
        try:
            command = parse_move(input(f"{name} move (r c), 'p' to pass or 'r' to resign: "))
        except ValueError:
            print("Invalid input, enter 'r c', 'p' or 'r'.")
            continue

        if command[0] == "pass":
            game.play(None, None)
        elif command[0] == "resign":
            game.resign(game.current_player)
        elif not game.play(command[1], command[2]):
            print(f"Invalid move ({game.last_error.reason}), try again.")

    print("\nGame over!")
    print(game)
    b_score, w_score = game.score()
    print(f"Final Score - Black: {b_score}, White: {w_score}")
    winner = game.winner()
    if winner == GoGame.BLACK:
        print("Black wins!")
    elif winner == GoGame.WHITE:
        print("White wins!")
    else:
        print("It's a draw!")

    if args.sgf:
        with open(args.sgf, "wb") as f:
            f.write(game.to_sgf())
        print(f"Game record written to {args.sgf}")


if __name__ == "__main__":
    main()
