import argparse
import json
import logging
import sys
from typing import List, Optional

from application.use_cases import (
    FinishSessionUseCase,
    ResolveWorkoutsUseCase,
    StartSessionUseCase,
    WorkoutSessionService,
)
from backend.services.rest_timer import RestTimer, RestTimerRunner
from domain.session import (
    NavigateBack,
    NavigateNext,
    Phase,
    RestComplete,
    SessionState,
    SkipRest,
    SkipWarmup,
    CompleteSet,
)
from infrastructure.cache import InMemoryWorkoutCache
from infrastructure.local import JsonFileWorkoutCatalog, JsonLinesWorkoutLogRepository

logger = logging.getLogger(__name__)

EXIT_COMMANDS = {"q", "quit", "exit"}

COMMANDS = {
    "w": SkipWarmup,
    "skip-warmup": SkipWarmup,
    "c": CompleteSet,
    "done": CompleteSet,
    "r": SkipRest,
    "skip-rest": SkipRest,
    "b": NavigateBack,
    "back": NavigateBack,
    "n": NavigateNext,
    "next": NavigateNext,
}

HELP = "commands: [w]armup skip, [c]omplete set, [r] skip rest, [b]ack, [n]ext, [q]uit"


def apply_command(session: WorkoutSessionService, command: str) -> SessionState:
    """Dispatch the action named by a typed command."""
    action_type = COMMANDS.get(command.strip().lower())
    if action_type is None:
        raise ValueError(f"Unknown command: {command!r}")
    return session.dispatch(action_type())


def sync_timer(session: WorkoutSessionService, timer: RestTimer) -> None:
    """Start the timer on entering rest, cancel it on leaving."""
    state = session.state
    if state.phase == Phase.REST:
        if not timer.running:
            timer.start(state.rest_duration)
    elif timer.running:
        timer.cancel()


def render(session: WorkoutSessionService, timer: Optional[RestTimer] = None) -> str:
    view = session.view()
    progress = view["progress"]
    bar = " ".join(f"[{'#' * round(f * 4):<4}]" for f in progress["fills"])
    lines = [bar]

    phase = view["phase"]
    if phase == Phase.WARMUP.value:
        lines.append("Warmup. Type 'w' to start the first exercise.")
    elif phase == Phase.COMPLETED.value:
        lines.append("Session complete.")
    else:
        exercise = view["exercise"]
        workout = exercise["workout"]
        lines.append(
            f"{view['current_exercise_index'] + 1}/{view['exercise_count']} "
            f"{workout['title']}: {exercise['sets_label']} {exercise['reps_label']}".rstrip()
        )
        lines.append(f"Sets done: {view['current_set']}/{exercise['total_sets']}")
        if phase == Phase.REST.value:
            remaining = timer.remaining if timer is not None else view["rest_duration"]
            lines.append(f"Resting: {remaining}s left (type 'r' to skip)")
    return "\n".join(lines)


def render_summary(session: WorkoutSessionService) -> str:
    summary = session.summary
    if summary is None:
        return "No summary available."
    lines = [
        f"Duration: {summary.duration_formatted}",
        f"Exercises: {summary.exercise_count}  Sets: {summary.total_sets}",
    ]
    for log in summary.logs:
        lines.append(f"  - {log.title}: {log.sets_completed} sets")
    lines.append("Logs saved." if summary.persisted else "Logs not saved.")
    return "\n".join(lines)


def _confirm_exit() -> bool:
    answer = input("Exit workout? Progress will not be saved. [y/N] ")
    return answer.strip().lower() in ("y", "yes")


def run_session(session: WorkoutSessionService, *, tick_seconds: float = 1.0) -> int:
    """Interactive loop over stdin. Returns a process exit code."""
    def on_rest_complete() -> None:
        session.dispatch(RestComplete())
        print("\nRest over.\n" + render(session))

    timer = RestTimer(on_complete=on_rest_complete)
    runner = RestTimerRunner(timer, interval=tick_seconds)
    runner.start()

    print(HELP)
    try:
        while session.state.phase != Phase.COMPLETED:
            print(render(session, timer))
            command = input("> ").strip()
            if not command:
                continue
            if command.lower() in EXIT_COMMANDS:
                if _confirm_exit():
                    print("Workout discarded.")
                    return 1
                continue
            try:
                apply_command(session, command)
            except ValueError as e:
                print(f"{e}. {HELP}")
                continue
            sync_timer(session, timer)
    except (EOFError, KeyboardInterrupt):
        print("\nWorkout discarded.")
        return 1
    finally:
        runner.stop()

    print(render_summary(session))
    return 0


def _build_start_use_case(args) -> StartSessionUseCase:
    catalog = JsonFileWorkoutCatalog(args.workouts_file)
    resolver = ResolveWorkoutsUseCase(catalog=catalog, cache=InMemoryWorkoutCache())
    log_repo = JsonLinesWorkoutLogRepository(args.log_file) if args.log_file else None
    return StartSessionUseCase(resolver=resolver, finisher=FinishSessionUseCase(log_repo=log_repo))


def _cmd_run(args) -> int:
    result = _build_start_use_case(args).execute(
        args.workout_ids,
        user_id=args.user,
        timed_rest=not args.no_rest,
    )
    if result.missing_ids:
        print(f"Skipping unknown workouts: {', '.join(result.missing_ids)}", file=sys.stderr)
    if not result.success:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    session = result.session
    if args.weight:
        for step in session.warmup(args.weight):
            print(f"  {step['label']}: {step['reps']} reps @ {step['weight']} lb, rest {step['rest']}s")
    return run_session(session)


def _cmd_list(args) -> int:
    for record in JsonFileWorkoutCatalog(args.workouts_file).list_workouts():
        print(f"{record['id']}\t{record.get('title', '')}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run a guided workout session in the terminal")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser("run", help="Run a session over the given workout ids")
    run.add_argument("workout_ids", nargs="+", help="Workout ids in session order")
    run.add_argument("--workouts-file", required=True, help="JSON file with workout records")
    run.add_argument("--user", help="User id; enables saving logs")
    run.add_argument("--log-file", help="JSON-lines file to append saved logs to")
    run.add_argument("--no-rest", action="store_true", help="Disable timed rest between sets")
    run.add_argument("--weight", type=float, help="Working weight (lb) to print a warmup ramp")
    run.set_defaults(func=_cmd_run)

    list_cmd = subparsers.add_parser("list", help="List workouts in the catalog file")
    list_cmd.add_argument("--workouts-file", required=True, help="JSON file with workout records")
    list_cmd.set_defaults(func=_cmd_list)

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        return args.func(args)
    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
