"""
1) Load every person dataset in the "data" directory into an explicit registry.
2) Optionally store the datasets with SQLite and reload the registry from it.
3) Pick a dataset and a visible date range (its default unless overridden).
4) Validate the range and the dataset.
5) Lay out year ticks, period blocks and event points.
6) Plot the timeline.
"""

from contextlib import closing
from pathlib import Path
import argparse
import logging
import sys

from calendar_mapper import format_date_display
from database import build_registry, create_database, dataset_names, store_dataset
from plotting import plot_timeline
from registry import load_registry
from timeline import build_timeline
from validation import validate_people, validate_range


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    project_root = Path(__file__).parent.parent

    parser = argparse.ArgumentParser(description="Render a timeline of historical persons.")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=project_root / "data",
        help="Directory of *.json person datasets",
    )
    parser.add_argument("--dataset", help="Dataset file name (default: first one)")
    parser.add_argument("--start", help="Range start, e.g. -200-01-01")
    parser.add_argument("--end", help="Range end, e.g. 1220-12-31")
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="Also store the datasets in this SQLite file and read them back from it",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=project_root / "timeline.png",
        help="Image to write",
    )
    parser.add_argument("--show", action="store_true", help="Display instead of saving")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)-5.5s [%(name)s] %(message)s",
    )
    args = parse_args(argv)

    print(f"Loading datasets from: {args.data_dir}")
    registry = load_registry(args.data_dir)
    if not registry:
        print("  No datasets found")
        return 1
    print(f"  Found {len(registry)} datasets: {', '.join(registry.names())}")

    if args.db:
        # Delete existing database to ensure fresh start
        if args.db.exists():
            args.db.unlink()
            print(f"Deleted existing database: {args.db}")

        print(f"Storing datasets in SQLite: {args.db}")
        with closing(create_database(args.db)) as conn:
            for name in registry.names():
                dataset = registry.get(name)
                store_dataset(conn, name, dataset.people, dataset.start, dataset.end)
            print(f"  Stored {len(dataset_names(conn))} datasets")
            registry = build_registry(conn)

    name = args.dataset or registry.names()[0]
    try:
        dataset = registry.get(name)
    except KeyError as e:
        print(f"  {e.args[0]}")
        return 1

    start = args.start or dataset.start
    end = args.end or dataset.end
    print(f"Dataset {name}: {format_date_display(start)} ~ {format_date_display(end)}")

    print("Validating range...")
    range_warnings = validate_range(start, end)
    if range_warnings:
        for w in range_warnings:
            print(f"    - {w}")
        return 1

    print("Validating dataset...")
    warnings = validate_people(dataset.people)
    if warnings:
        print(f"  Found {len(warnings)} validation warnings:")
        for w in warnings[:10]:  # Show first 10 warnings
            print(f"    - {w}")
        if len(warnings) > 10:
            print(f"    ... and {len(warnings) - 10} more")
    else:
        print("  No validation issues found")

    print("Laying out timeline...")
    view = build_timeline(dataset.people, start, end)
    n_blocks = sum(len(lane.blocks) for lane in view.lanes)
    n_points = sum(len(lane.points) for lane in view.lanes)
    print(
        f"  {len(view.lanes)} people, {n_blocks} visible periods, "
        f"{n_points} visible events, {len(view.ticks)} year ticks"
    )

    if args.show:
        plot_timeline(view)
    else:
        print(f"Plotting timeline to: {args.output}")
        plot_timeline(view, args.output)

    print("Done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
