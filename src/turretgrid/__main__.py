"""CLI entry point for the Turretgrid terminal game."""

from __future__ import annotations

from turretgrid.presentation.terminal import run_terminal


def main() -> None:
    game = run_terminal()

    summary = game.snapshot()
    print("Turretgrid Run")
    print(f"state={summary['state']}")
    if "gold" in summary:
        print(f"difficulty={summary['difficulty']}")
        print(f"gold={summary['gold']}")
        print(f"lives={summary['lives']}")
        print(f"waves_completed={summary['waves_completed']}")
        print(f"towers_built={summary['tower_count']}")


if __name__ == "__main__":
    main()
