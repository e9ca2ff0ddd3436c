# gridsnake/main.py
import argparse
import logging

from gridsnake.config import AppConfig, DIFFICULTY_INTERVALS


def run_play(cfg: AppConfig):
    from gridsnake.runners.run_snake import main as play
    play(cfg)

def run_sim(cfg: AppConfig):
    from gridsnake.runners.run_headless import main as sim
    sim(cfg)


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="gridsnake")
    p.add_argument("mode", choices=["play", "sim"])
    p.add_argument("--difficulty", choices=list(DIFFICULTY_INTERVALS), default="easy")
    p.add_argument("--food", choices=["single", "tiered"], default="single")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--log", default=None, help="append per-game results to this CSV")
    p.add_argument("--games", type=int, default=5, help="sim mode only")
    p.add_argument("--grid-lines", action="store_true")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def config_from_args(args) -> AppConfig:
    return AppConfig().with_(
        tick_ms=DIFFICULTY_INTERVALS[args.difficulty],
        food_policy=args.food,
        seed=args.seed,
        log_path=args.log,
        sim_games=args.games,
        render_grid_lines=args.grid_lines,
    ).validate()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = config_from_args(args)
    if args.mode == "play":
        run_play(cfg)
    elif args.mode == "sim":
        run_sim(cfg)

if __name__ == "__main__":
    main()
