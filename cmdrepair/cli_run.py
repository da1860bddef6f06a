import argparse
import json
import logging
import sys
from typing import Any

from cmdrepair.container import DependencyContainer, container
from cmdrepair.exceptions import BaseAppError
from cmdrepair.ports.command.command_runner_port import CommandRunnerPort


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cmdrepair",
        description=(
            "Run commands through the repairing dispatcher, or inspect how a command "
            "would be resolved, repaired and launched."
        ),
    )
    parser.add_argument(
        "--runner",
        choices=["auto", "native", "repaired"],
        default=None,
        help="Override the configured runner (default: CMDREPAIR_RUNNER or auto)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty print results with colors",
    )
    parser.add_argument(
        "--json", dest="as_json", action="store_true", help="Print results as JSON"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="action", required=True)

    run_p = sub.add_parser("run", help="Run a command; exit 0 on success")
    run_p.add_argument("command", help="Program name or full command line")
    run_p.add_argument("arguments", nargs=argparse.REMAINDER, help="Argument vector")

    capture_p = sub.add_parser("capture", help="Run a command line and print its output")
    capture_p.add_argument("command", help="Full command line")

    resolve_p = sub.add_parser("resolve", help="Show the file a command name resolves to")
    resolve_p.add_argument("stem", help="Command name, with or without extension")

    repair_p = sub.add_parser("repair", help="Show the repaired command line")
    repair_p.add_argument("command", help="Full command line")

    plan_p = sub.add_parser("plan", help="Show how a command would be launched")
    plan_p.add_argument("command", help="Program name or full command line")
    plan_p.add_argument("arguments", nargs=argparse.REMAINDER, help="Argument vector")
    return parser


def _select_runner(deps: DependencyContainer, name: str | None) -> CommandRunnerPort:
    if name == "native":
        return deps.get_native_runner()
    if name == "repaired":
        return deps.get_repaired_runner()
    return deps.get_command_runner()


def _exit_code(status: int | None) -> int:
    if status is None:
        return 1
    if status < 0:
        # killed by signal -status, reported the way the shell does
        return 128 - status
    return status


def _print_result(result: dict[str, Any], pretty: bool, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result, ensure_ascii=False, indent=2))
        return
    if pretty:
        from rich import box
        from rich.console import Console
        from rich.table import Table

        table = Table(box=box.ROUNDED, show_header=False, border_style="magenta")
        table.add_column("field", style="bold cyan")
        table.add_column("value")
        for key, value in result.items():
            table.add_row(key, "" if value is None else str(value))
        Console(soft_wrap=True).print(table)
        return
    for key, value in result.items():
        print(f"{key}: {'' if value is None else value}")


def main(argv: list[str] | None = None, deps: DependencyContainer | None = None) -> int:
    args = _build_parser().parse_args(argv)
    deps = deps or container

    try:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else deps.get_settings().log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            stream=sys.stderr,
        )

        if args.action == "run":
            runner = _select_runner(deps, args.runner)
            ok = runner.run(args.command, *args.arguments)
            if args.pretty or args.as_json:
                _print_result(
                    {"succeeded": ok, "exit_status": runner.last_status},
                    args.pretty,
                    args.as_json,
                )
            return 0 if ok else 1

        if args.action == "capture":
            runner = _select_runner(deps, args.runner)
            output = runner.capture(args.command)
            status = runner.last_status
            if args.pretty or args.as_json:
                _print_result(
                    {"output": output, "exit_status": status}, args.pretty, args.as_json
                )
            else:
                sys.stdout.write(output)
            return _exit_code(status)

        if args.action == "resolve":
            target = deps.get_command_repairer().resolve(args.stem)
            _print_result(target.get_details(), args.pretty, args.as_json)
            return 0

        if args.action == "repair":
            repaired = deps.get_command_repairer().repair(args.command)
            if args.pretty or args.as_json:
                _print_result(
                    {"command": args.command, "repaired": repaired},
                    args.pretty,
                    args.as_json,
                )
            else:
                print(repaired)
            return 0

        plan = deps.get_repaired_runner().plan(args.command, *args.arguments)
        _print_result(plan.get_details(), args.pretty, args.as_json)
        return 0
    except BaseAppError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
