"""Command-line interface for allocating stations to teams."""

import argparse
import json
import logging
import sys
from dataclasses import replace

from team_allocation.adapters.config import AppConfig, ClusteringSettingsLoader
from team_allocation.adapters.excel_team_exporter import ExcelTeamExporter
from team_allocation.adapters.spreadsheet_station_repository import SpreadsheetStationRepository
from team_allocation.adapters.team_formatter import TeamFormatter
from team_allocation.application.services import ClusteringService, plan_load_bounds
from team_allocation.domain.models.station import Station
from team_allocation.domain.ports.station_repository import StationRepository


def _configure_logging(level: str) -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Geographic team allocation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Allocate stations to 5 teams with 10% tolerance
  team-allocation run stations.csv --teams 5 --tolerance 10

  # Same, as JSON, without the rebalancing pass
  team-allocation run stations.xlsx --teams 5 --json --no-rebalance

  # Save the allocation as an Excel workbook
  team-allocation run stations.xlsx --teams 5 --export allocation.xlsx

  # Show the per-team load bounds only
  team-allocation bounds stations.csv --teams 5 --tolerance 10
        """,
    )
    parser.add_argument("--config", help="TOML config file with a [clustering] section")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    run_parser = subparsers.add_parser("run", help="Allocate stations to teams")
    run_parser.add_argument(
        "stations", help="Excel (.xlsx) or CSV file with MA_TRAM, LATITUDE, LONGITUDE, SL_VITRI"
    )
    run_parser.add_argument("--teams", type=int, help="Number of teams")
    run_parser.add_argument("--tolerance", type=float, help="Load tolerance in percent")
    run_parser.add_argument(
        "--no-rebalance", action="store_true", help="Skip the swap refinement pass"
    )
    run_parser.add_argument("--json", action="store_true", help="Output as JSON")
    run_parser.add_argument(
        "--members", action="store_true", help="List member station codes per team"
    )
    run_parser.add_argument("--export", help="Write the teams to this .xlsx file")

    bounds_parser = subparsers.add_parser("bounds", help="Show per-team load bounds")
    bounds_parser.add_argument(
        "stations", help="Excel (.xlsx) or CSV file with MA_TRAM, LATITUDE, LONGITUDE, SL_VITRI"
    )
    bounds_parser.add_argument("--teams", type=int, help="Number of teams")
    bounds_parser.add_argument("--tolerance", type=float, help="Load tolerance in percent")

    return parser


def _load_config(config_file: str | None) -> AppConfig:
    """Load app config, applying the TOML file when one is given."""
    config = AppConfig(config_file=config_file) if config_file else AppConfig()
    config.apply_config_file()
    return config


def _load_stations(path: str) -> list[Station]:
    """Load stations from an Excel workbook or CSV file."""
    repository: StationRepository = SpreadsheetStationRepository(path)
    return repository.load_stations()


def run_command(config: AppConfig, args: argparse.Namespace) -> int:
    """Allocate stations and print the teams."""
    stations = _load_stations(args.stations)
    params = ClusteringSettingsLoader.load_processing_params(config, args.teams, args.tolerance)
    settings = ClusteringSettingsLoader.load_rebalance_settings(config)
    if args.no_rebalance:
        settings = replace(settings, enabled=False)

    result = ClusteringService(settings).run(stations, params)
    formatter = TeamFormatter()

    if args.export and result.teams:
        ExcelTeamExporter(formatter).export(result.teams, args.export)

    if args.json:
        print(json.dumps(formatter.result_to_dict(result), indent=2, ensure_ascii=False))
        return 0

    if not result.teams:
        print("No teams produced.", file=sys.stderr)
        return 1

    if result.bounds is not None:
        print(
            f"\nTarget load {result.bounds.target:.2f} "
            f"(range {result.bounds.min_load:.2f} - {result.bounds.max_load:.2f})\n"
        )
    for line in formatter.format_table(result.teams):
        print(line)
    if args.members:
        print()
        for team in result.teams:
            print(f"{team.display_name}: {formatter.format_members(team)}")
    if result.fallback_assignments:
        print()
        for fallback in result.fallback_assignments:
            print(
                f"Note: {fallback.station_code} placed on {fallback.team_id} above max load "
                f"({fallback.resulting_load} > {fallback.max_load:.2f})"
            )
    return 0


def bounds_command(config: AppConfig, args: argparse.Namespace) -> int:
    """Print the per-team load bounds for a station file."""
    stations = _load_stations(args.stations)
    params = ClusteringSettingsLoader.load_processing_params(config, args.teams, args.tolerance)
    total_weight = sum(s.weight for s in stations)
    bounds = plan_load_bounds(total_weight, params.number_of_teams, params.tolerance_percent)
    if params.number_of_teams <= 0:
        print(
            f"Number of teams must be positive, got {params.number_of_teams}.", file=sys.stderr
        )
        return 1
    if bounds is None:
        print("Total weight is zero, no bounds to compute.", file=sys.stderr)
        return 1

    print(f"Stations: {len(stations)}")
    print(f"Total weight: {total_weight}")
    print(f"Teams: {params.number_of_teams}")
    print(f"Target: {bounds.target:.2f}")
    print(f"Min load: {bounds.min_load:.2f}")
    print(f"Max load: {bounds.max_load:.2f}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = _load_config(args.config)
        _configure_logging(config.log_level)
        if args.command == "run":
            return run_command(config, args)
        if args.command == "bounds":
            return bounds_command(config, args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
