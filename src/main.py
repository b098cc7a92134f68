import argparse
import logging
import signal
import sys
import threading
from typing import Optional, Sequence

from app_config import AppConfig, AppConfigurationError, load_app_config
from app_config_schema import ENV_MUTE, ENV_OUTPUT_DEVICE
from notification import (
    AudioOutput,
    NotificationConfig,
    NotificationConfigurationError,
    NotificationPlayer,
    NullAudioOutput,
    SoundDeviceAudioOutput,
)
from pomodoro import (
    CountdownEngine,
    SessionConfigurationError,
    SessionScheduler,
    SinkPublisher,
    build_session,
    build_timer_phase,
)
from pomodoro.constants import (
    DEFAULT_CYCLES,
    DEFAULT_LONG_BREAK_MINUTES,
    DEFAULT_SHORT_BREAK_MINUTES,
    DEFAULT_WORK_MINUTES,
)
from presentation import LoggingSink, RichConsoleSink

__version__ = "0.1.0"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    return logging.getLogger("pomocli")


def setup_signal_handlers(cancel_event: threading.Event) -> None:
    """Stop the running countdown on SIGTERM and SIGINT."""

    def signal_handler(signum: int, frame) -> None:
        signal_name = signal.Signals(signum).name
        print(f"\n👋 {signal_name} received, stopping...\n", file=sys.stderr)
        cancel_event.set()

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pomocli",
        description="A beautiful pomodoro timer for developers",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log engine events to stderr (at least INFO level)",
    )
    parser.add_argument(
        "--mute",
        action="store_true",
        default=None,
        help="Do not play the notification sound",
    )
    parser.add_argument(
        "--output-device",
        type=int,
        default=None,
        metavar="INDEX",
        help="sounddevice output device index (default: system default)",
    )

    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    start = commands.add_parser("start", help="Start a pomodoro session")
    start.add_argument(
        "-w",
        "--work",
        type=int,
        default=DEFAULT_WORK_MINUTES,
        help=f"Work duration in minutes (default: {DEFAULT_WORK_MINUTES})",
    )
    start.add_argument(
        "-s",
        "--short-break",
        type=int,
        default=DEFAULT_SHORT_BREAK_MINUTES,
        help=f"Short break duration in minutes (default: {DEFAULT_SHORT_BREAK_MINUTES})",
    )
    start.add_argument(
        "-l",
        "--long-break",
        type=int,
        default=DEFAULT_LONG_BREAK_MINUTES,
        help=f"Long break duration in minutes (default: {DEFAULT_LONG_BREAK_MINUTES})",
    )
    start.add_argument(
        "-c",
        "--cycles",
        type=int,
        default=DEFAULT_CYCLES,
        help=f"Number of pomodoros before long break (default: {DEFAULT_CYCLES})",
    )

    timer = commands.add_parser("timer", help="Start a quick timer")
    timer.add_argument("minutes", type=int, metavar="MINUTES", help="Duration in minutes")

    commands.add_parser("test-sound", help="Test the notification sound")
    return parser


def build_audio_output(notification_config: NotificationConfig) -> AudioOutput:
    if not notification_config.enabled:
        return NullAudioOutput(logger=logging.getLogger("notification.output"))
    return SoundDeviceAudioOutput(
        output_device_index=notification_config.output_device_index,
        logger=logging.getLogger("notification.output"),
    )


def run_command(
    args: argparse.Namespace,
    app_config: AppConfig,
    player: NotificationPlayer,
    cancel_event: threading.Event,
    logger: logging.Logger,
) -> int:
    if args.command == "test-sound":
        console_sink = RichConsoleSink(clear_on_complete=False)
        console = console_sink.console
        console.print("🔊 Testing notification sound...", style="bold bright_cyan")
        if player.notify():
            console.print("Sound test complete!", style="bright_green")
        else:
            console.print("No sound could be played (see log for details).", style="yellow")
        return 0

    if args.command == "start":
        session = build_session(
            work_minutes=args.work,
            short_break_minutes=args.short_break,
            long_break_minutes=args.long_break,
            cycles=args.cycles,
        )
        phase = None
    else:
        session = None
        phase = build_timer_phase(args.minutes)

    console_sink = RichConsoleSink()
    publisher = SinkPublisher(
        [console_sink, LoggingSink(logger=logging.getLogger("presentation"))],
        logger=logging.getLogger("pomodoro.events"),
    )
    engine = CountdownEngine(
        publisher,
        notifier=player,
        tick_interval_seconds=app_config.runtime.tick_interval_seconds,
        cancel_event=cancel_event,
        logger=logging.getLogger("pomodoro"),
    )
    scheduler = SessionScheduler(
        engine,
        publisher,
        phase_pause_seconds=app_config.runtime.phase_pause_seconds,
        logger=logging.getLogger("pomodoro.scheduler"),
    )

    try:
        if session is not None:
            completed = scheduler.run(session).completed
        else:
            completed = scheduler.run_timer(phase).completed
    finally:
        console_sink.close()

    if not completed:
        logger.warning("Countdown cancelled before completion")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the pomodoro command-line interface."""
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides = {
        ENV_MUTE: args.mute,
        ENV_OUTPUT_DEVICE: args.output_device,
    }
    try:
        app_config = load_app_config(overrides=overrides)
    except AppConfigurationError as error:
        setup_logging()
        logging.getLogger("pomocli").error("App configuration error: %s", error)
        return 1

    level = getattr(logging, app_config.runtime.log_level)
    if args.verbose:
        # --verbose raises the level to INFO but never hides a configured DEBUG.
        level = min(level, logging.INFO)
    logger = setup_logging(level=level)

    try:
        notification_config = NotificationConfig.from_settings(app_config.audio)
    except NotificationConfigurationError as error:
        logger.error("Notification configuration error: %s", error)
        return 1

    cancel_event = threading.Event()
    setup_signal_handlers(cancel_event)

    with NotificationPlayer(
        output=build_audio_output(notification_config),
        tone_config=notification_config.tone,
        logger=logging.getLogger("notification"),
    ) as player:
        try:
            return run_command(args, app_config, player, cancel_event, logger)
        except SessionConfigurationError as error:
            logger.error("Configuration error: %s", error)
            return 1


if __name__ == "__main__":
    sys.exit(main())
