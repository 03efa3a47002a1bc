# paging/pipeline.py

from ossim import PagingReport, build_traces, calculate_page_requirements
from ossim.errors import InvalidConfiguration

from .fifo import FIFOPageManager
from .lru import LRUPageManager

PAGE_MANAGERS = {
    "FIFO": FIFOPageManager,
    "LRU": LRUPageManager,
}

SOURCES = ("requirements", "trace")


def make_page_manager(algorithm, max_pages, verbose=False):
    PageManagerClass = PAGE_MANAGERS.get(str(algorithm).upper())
    if PageManagerClass is None:
        raise InvalidConfiguration(f"unknown replacement algorithm {algorithm!r}")
    return PageManagerClass(max_pages, verbose=verbose)


def simulate_paging(context, config, source="requirements", verbose=False):
    """
    Trace builder -> page requirement calculator -> replacement engine.

    Args:
        context: SimulationContext; it is copied, never mutated
        config: SimulationConfig (page_size, max_pages, algorithm are used)
        source: "requirements" replays pages 0..n-1 of every catalog program
            through one shared engine; "trace" replays each process's visit
            list through its own engine
        verbose: print each engine operation with the resident set
    Returns: PagingReport
    """
    config.validate()
    if source not in SOURCES:
        raise InvalidConfiguration(f"unknown reference source {source!r}, expected one of {', '.join(SOURCES)}")

    run = context.fresh()
    build_traces(run, config.page_size)
    requirements = calculate_page_requirements(
        run.catalog, config.page_size, referenced=run.registry.program_names(), unresolved=run
    )

    report = PagingReport(
        algorithm=config.algorithm,
        page_size=config.page_size,
        max_pages=config.max_pages,
        source=source,
        requirements=requirements,
        visit_lists={p.name: list(p.visit_list) for p in run.registry},
    )
    report.log.extend(run.log)

    if source == "requirements":
        manager = make_page_manager(config.algorithm, config.max_pages, verbose=verbose)
        logged = 0
        for program_name, pages in requirements.items():
            report.log.append(f"program {program_name} needs {pages} pages")
            manager.replay(range(pages))
            report.log.extend(manager.log[logged:])
            logged = len(manager.log)
        _collect(report, manager)
    else:
        for process in run.registry:
            manager = make_page_manager(config.algorithm, config.max_pages, verbose=verbose)
            report.log.append(f"process {process.name} references {len(process.visit_list)} pages")
            manager.replay(process.visit_list)
            report.log.extend(manager.log)
            report.per_process[process.name] = manager.get_stats()
            _collect(report, manager)

    report.unresolved = list(run.unresolved)
    return report


def _collect(report, manager):
    report.hits += manager.hits
    report.faults += manager.faults
    report.evictions.extend(manager.evictions)
