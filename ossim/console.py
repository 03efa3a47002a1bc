# console.py  – rich tables for the driver
from rich.console import Console
from rich.table import Table


def _console(console):
    return console if console is not None else Console()


def print_processes(registry, console=None):
    console = _console(console)
    table = Table(title="Process Details")
    for col in ("Name", "Arrival", "Run Time", "Program", "Status"):
        table.add_column(col, justify="center")
    for p in registry:
        table.add_row(p.name, str(p.arrival_time), str(p.run_time), p.program_name, p.status)
    console.print(table)


def print_programs(catalog, console=None):
    console = _console(console)
    table = Table(title="Program Details")
    table.add_column("Program")
    table.add_column("Function")
    table.add_column("Size", justify="right")
    for program in catalog:
        if not program.functions:
            table.add_row(program.name, "-", "0")
        for i, function in enumerate(program.functions):
            table.add_row(program.name if i == 0 else "", function.name, f"{function.size:g}")
    console.print(table)


def print_schedule(report, console=None):
    """Timing table for a SchedulingReport followed by the averages"""
    console = _console(console)
    table = Table(title=f"{report.title} Scheduling")
    for col in ("Process", "Arrival", "Run Time", "Start", "Finish", "Turnaround", "Weighted"):
        table.add_column(col, justify="center")

    for row in report.rows:
        start = "-" if row.first_scheduled is None else str(row.first_scheduled)
        table.add_row(
            row.name,
            str(row.arrival_time),
            str(row.run_time),
            start,
            str(row.finish_time),
            f"{row.turnaround_time:.0f}",
            f"{row.weighted_turnaround_time:.2f}",
        )
    console.print(table)
    console.print(f"Average Turnaround Time:          {report.average_turnaround:.2f}")
    console.print(f"Average Weighted Turnaround Time: {report.average_weighted_turnaround:.2f}")


def print_paging(report, console=None, show_log=True):
    """Page requirements, optional operation log and the hit/fault summary"""
    console = _console(console)

    table = Table(title=f"Page Requirements (page size {report.page_size:g})")
    table.add_column("Program")
    table.add_column("Pages", justify="right")
    for name, pages in report.requirements.items():
        table.add_row(name, str(pages))
    console.print(table)

    if show_log and report.log:
        console.print("[bold]Paging operations[/bold]")
        for entry in report.log:
            console.print(f"  {entry}", markup=False)

    if report.per_process:
        per = Table(title="Per Process")
        for col in ("Process", "Hits", "Faults", "Hit Rate"):
            per.add_column(col, justify="center")
        for name, stats in report.per_process.items():
            per.add_row(name, str(stats["hits"]), str(stats["faults"]), f"{stats['hit_rate'] * 100:.2f}%")
        console.print(per)

    console.print(f"{report.algorithm} summary (max pages {report.max_pages}, source {report.source})")
    console.print(f"Page hits:   {report.hits}")
    console.print(f"Page faults: {report.faults}")
    console.print(f"Hit rate:    {report.hit_rate * 100:.2f}%")
