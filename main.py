# main.py
import logging
import sys

from rich.console import Console
from rich.prompt import FloatPrompt, IntPrompt, Prompt

from ossim import InvalidConfiguration, SimulationConfig
from ossim.console import print_paging, print_processes, print_programs
from ossim.loader import load_context
from paging import SOURCES, simulate_paging
from schedulers import run_scheduler

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("ossim")

console = Console()

MENU = """
===== Process Scheduling & Paging System =====
1. Show process information
2. Show program details
3. First-Come, First-Served scheduling (FCFS)
4. Round Robin scheduling (RR)
5. Paging with default settings (page size 4, 3 pages)
6. Set page size and run paging
7. Exit"""


def parse_args(argv):
    args = {}
    for arg in argv:
        if "=" in arg:
            k, v = arg.split("=", 1)
            args[k] = v
        else:
            logger.warning("ignoring argument %r, expected key=value", arg)
    return args


def run_schedule(context, algorithm, quantum, args):
    """Run a scheduler, print it, append it to the result file and export if asked"""
    scheduler = run_scheduler(context, algorithm, quantum=quantum, verbose=args.get("verbose") == "1")
    scheduler.print_stats(console=console)

    result_file = args.get("result", "result.txt")
    scheduler.report().append_to(result_file)
    console.print(f"{scheduler.name} scheduling finished. Results appended to {result_file}")

    if "json" in args:
        scheduler.export_json(args["json"])
        console.print(f"Timeline exported to {args['json']}")
    if "csv" in args:
        scheduler.export_csv(args["csv"])
        console.print(f"Timeline exported to {args['csv']}")

    if args.get("visualize") == "1":
        from visualizer import run_pygame_visualization

        run_pygame_visualization(scheduler, fps=int(args.get("fps", "2")))
    return scheduler


def run_paging(context, config, args):
    report = simulate_paging(
        context, config, source=args.get("source", "requirements"), verbose=args.get("verbose") == "1"
    )
    print_paging(report, console=console)
    for reference in report.unresolved:
        logger.warning("%s", reference)
    return report


def prompt_paging_config():
    page_size = FloatPrompt.ask("Page size (KB)", default=4.0)
    max_pages = IntPrompt.ask("Max pages per process", default=3)
    algorithm = Prompt.ask("Replacement algorithm", choices=["FIFO", "LRU"], default="FIFO")
    return SimulationConfig(page_size=page_size, max_pages=max_pages, algorithm=algorithm)


def menu(context, config, args):
    """Interactive loop; invalid configuration is reported and the menu shown again"""
    while True:
        console.print(MENU)
        choice = IntPrompt.ask("Choose an option", choices=[str(i) for i in range(1, 8)])
        try:
            if choice == 1:
                print_processes(context.registry, console=console)
            elif choice == 2:
                print_programs(context.catalog, console=console)
            elif choice == 3:
                run_schedule(context, "fcfs", None, args)
            elif choice == 4:
                quantum = IntPrompt.ask("Time quantum", default=config.quantum)
                run_schedule(context, "rr", quantum, args)
            elif choice == 5:
                algorithm = Prompt.ask("Replacement algorithm", choices=["FIFO", "LRU"], default="FIFO")
                run_paging(context, SimulationConfig(algorithm=algorithm), args)
            elif choice == 6:
                run_paging(context, prompt_paging_config(), args)
            else:
                console.print("Goodbye!")
                return
        except InvalidConfiguration as e:
            console.print(f"[red]Invalid configuration:[/red] {e}")


def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)
    mode = args.get("mode", "menu").lower()

    try:
        config = SimulationConfig.from_args(args).validate()
        if args.get("source", "requirements") not in SOURCES:
            raise InvalidConfiguration(f"unknown reference source {args['source']!r}")
    except InvalidConfiguration as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    try:
        context = load_context(args.get("data", "data"))
    except OSError as e:
        logger.error("Could not read input files: %s", e)
        return 1

    if mode == "processes":
        print_processes(context.registry, console=console)
    elif mode == "programs":
        print_programs(context.catalog, console=console)
    elif mode == "fcfs":
        run_schedule(context, "fcfs", None, args)
    elif mode in ("rr", "roundrobin"):
        run_schedule(context, "rr", config.quantum, args)
    elif mode == "paging":
        run_paging(context, config, args)
    elif mode == "menu":
        menu(context, config, args)
    else:
        logger.error("Unknown mode %r. Must be one of: processes, programs, fcfs, rr, paging, menu", mode)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
