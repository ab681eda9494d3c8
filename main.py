#main.py

import argparse
import cProfile
import pstats
import constants as C
from environment import Environment
from simulation import Simulation
import logger

def build_parser():
    ap = argparse.ArgumentParser(description="Daisyworld: albedo feedback on a grid of daisies.")
    ap.add_argument("--width", type=int, default=C.WORLD_WIDTH)
    ap.add_argument("--height", type=int, default=C.WORLD_HEIGHT)
    ap.add_argument("--death-rate", type=float, default=C.DEATH_RATE)
    ap.add_argument("--generations", type=int, default=C.GENERATIONS)
    ap.add_argument("--seed", type=int, default=C.RANDOM_SEED)
    ap.add_argument("--luminosity", type=float, default=C.LUMINOSITY)
    ap.add_argument("--legacy-row-bleed", action="store_true", default=C.LEGACY_ROW_BLEED,
                    help="let left/right neighbours wrap across row ends")
    ap.add_argument("--stop-when-extinct", action="store_true", default=False)
    ap.add_argument("--profile", action="store_true", default=False,
                    help="run under cProfile and print the slowest calls")
    return ap

def initialize_simulation(args):
    logger.log(f"Creating a {args.width}x{args.height} world with death rate {args.death_rate}")
    environment = Environment(luminosity=args.luminosity)
    sim = Simulation(args.width, args.height, args.death_rate, seed=args.seed,
                     environment=environment, row_bleed=args.legacy_row_bleed)
    logger.set_simulation(sim)
    return sim

def run_simulation(sim, generations, stop_when_extinct=False):
    logger.log("Starting main simulation loop...")
    sim.run(generations, stop_when_extinct=stop_when_extinct, report=True)
    logger.log("Main simulation loop ended.")

def shutdown_simulation(sim):
    logger.log(f"Totals: {sim.total_births} births, {sim.total_deaths} deaths "
               f"over {sim.generation} generations.")
    logger.clear_simulation()
    logger.log("Simulation ended cleanly.")

def simulate(ap, args):
    logger.log("--- Simulation Start ---")
    try:
        sim = initialize_simulation(args)
    except ValueError as e:
        ap.error(str(e))
    run_simulation(sim, args.generations, args.stop_when_extinct)
    shutdown_simulation(sim)
    logger.log("--- Simulation Exit ---")
    return sim

def profile_simulation(ap, args):
    profiler = cProfile.Profile()
    try:
        return profiler.runcall(simulate, ap, args)
    finally:
        print("\n\n--- PROFILER REPORT ---")
        stats = pstats.Stats(profiler)
        # Sort the stats by the cumulative time spent in each function
        stats.sort_stats(pstats.SortKey.CUMULATIVE)
        stats.print_stats(C.PROFILER_PRINT_LINE_COUNT)

def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.generations < 0:
        ap.error("--generations must be >= 0")

    if args.profile:
        return profile_simulation(ap, args)
    return simulate(ap, args)

if __name__ == '__main__':
    main()
