"""Command-line front end of the pivotchat translation engine.

Runs one translation, transliteration, preview or chat view and prints the result.
Settings are read from pivotchat.ini when it exists; built-in defaults apply otherwise.

Examples:
    python pivot_translate.py translate "hello" --from english --to hindi
    python pivot_translate.py transliterate "namaste" --to hindi
    python pivot_translate.py chat "how are you" --sender telugu --receiver tamil --json
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Final, NoReturn

from config.loader import Config, ConfigLoader, ConfigLoaderError
from core.engine import TranslationEngine
from core.version import VERSION
from core.language.registry import LanguageRegistryError
from core.phrases.interface import PhraseStoreError
from utils.file_utils import FileUtils
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    from models.translation_models import ChatMessageView, TranslationResult

CFG_FILE: Final[str] = "pivotchat.ini"


def check_python_version() -> None:
    """Check if Python version is 3.12 or later.

    Raises:
        RuntimeError: If Python version is below 3.12.
    """
    if sys.version_info < (3, 12):
        msg = "Python 3.12 or later is required"
        raise RuntimeError(msg)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        print(f"\n{message}\n", file=sys.stderr)
        self.print_help(sys.stderr)
        raise SystemExit(2)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the command line.

    Args:
        argv (list[str] | None): Arguments without the program name; sys.argv when None.

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = _ArgumentParser(
        description="Offline meaning-pivot translation and transliteration",
        epilog='Example: python pivot_translate.py translate "hello" --from english --to hindi',
    )
    parser.add_argument("--config", dest="config", metavar="INI_FILE", default=CFG_FILE, help="Configuration file")
    parser.add_argument("--debug", dest="debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-level", dest="log_level", metavar="LEVEL", help="Override the log level")
    parser.add_argument("--phrase-store", dest="phrase_store", metavar="JSON_FILE", help="Read phrases from this file")
    parser.add_argument("--json", dest="as_json", action="store_true", help="Print the full result as JSON")
    parser.add_argument("--version", action="version", version=f"%(prog)s ver.{VERSION}")

    commands = parser.add_subparsers(dest="command", required=True)

    translate = commands.add_parser("translate", help="Translate text between two languages")
    translate.add_argument("text")
    translate.add_argument("--from", dest="source", default="english", metavar="LANGUAGE")
    translate.add_argument("--to", dest="target", required=True, metavar="LANGUAGE")

    transliterate = commands.add_parser("transliterate", help="Convert text between Latin and a native script")
    transliterate.add_argument("text")
    transliterate.add_argument("--to", dest="target", metavar="LANGUAGE", help="Romanized text to this language")
    transliterate.add_argument("--from", dest="source", metavar="LANGUAGE", help="Native text of this language")

    preview = commands.add_parser("preview", help="Show the native and English previews of typed text")
    preview.add_argument("text")
    preview.add_argument("--lang", dest="language", required=True, metavar="LANGUAGE")

    chat = commands.add_parser("chat", help="Render a chat message for sender and receiver")
    chat.add_argument("text")
    chat.add_argument("--sender", dest="sender", required=True, metavar="LANGUAGE")
    chat.add_argument("--receiver", dest="receiver", required=True, metavar="LANGUAGE")

    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> Config:
    """Load the configuration file and apply CLI overrides.

    A missing default configuration file is not an error; the defaults are used instead.

    Args:
        args (argparse.Namespace): Command-line arguments.

    Returns:
        Config: Configuration object.

    Raises:
        ConfigLoaderError: If the configuration file cannot be loaded.
    """
    config_path: Path = FileUtils.resolve_path(args.config)
    if args.config == CFG_FILE and not config_path.exists():
        config = Config()
        if args.debug:
            config.GENERAL.DEBUG = True
            config.GENERAL.LOG_LEVEL = "DEBUG"
        if args.log_level:
            config.GENERAL.LOG_LEVEL = args.log_level.upper()
        if args.phrase_store:
            config.PHRASE_STORE.PATH = args.phrase_store
        return config

    script_name: str = Path(sys.argv[0]).name
    return ConfigLoader(
        config_filename=str(config_path),
        script_name=script_name,
        debug=args.debug,
        log_level=args.log_level,
        phrase_store=args.phrase_store,
    ).config


def setup_logging(config: Config) -> None:
    log_file: str = str(FileUtils.resolve_path(config.GENERAL.LOG_FILE)) if config.GENERAL.LOG_FILE else ""
    LoggerUtils(log_file).set_level(config.GENERAL.LOG_LEVEL)  # type: ignore[arg-type]


def print_translation(result: TranslationResult, *, as_json: bool) -> None:
    if as_json:
        print(result.to_json(ensure_ascii=False, indent=2))
        return
    print(result.text)
    print(f"[{result.direction}] method={result.method} confidence={result.confidence:.2f}", file=sys.stderr)


def print_chat_view(view: ChatMessageView, *, as_json: bool) -> None:
    if as_json:
        print(view.to_json(ensure_ascii=False, indent=2))
        return
    print(f"{view.sender_language}: {view.sender_view}")
    print(f"english: {view.english_core}")
    print(f"{view.receiver_language}: {view.receiver_view}")
    print(f"[{view.direction}] confidence={view.confidence:.2f}", file=sys.stderr)


async def run(args: argparse.Namespace, engine: TranslationEngine) -> int:
    """Execute the selected sub-command.

    Args:
        args (argparse.Namespace): Command-line arguments.
        engine (TranslationEngine): Engine to run the command on.

    Returns:
        int: Process exit status.
    """
    await engine.component_load()
    try:
        match args.command:
            case "translate":
                print_translation(await engine.translate(args.text, args.source, args.target), as_json=args.as_json)
            case "transliterate":
                if args.target:
                    print(engine.transliterate_to_native(args.text, args.target))
                elif args.source:
                    print(engine.reverse_transliterate(args.text, args.source))
                else:
                    print("\nError: transliterate needs --to or --from", file=sys.stderr)
                    return 2
            case "preview":
                print(engine.native_preview(args.text, args.language))
                print(await engine.english_preview(args.text, args.language))
            case "chat":
                view: ChatMessageView = await engine.build_simple_chat_view(args.text, args.sender, args.receiver)
                print_chat_view(view, as_json=args.as_json)
    finally:
        await engine.component_teardown()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv (list[str] | None): Arguments without the program name.

    Returns:
        int: Process exit status.
    """
    check_python_version()
    args: argparse.Namespace = parse_arguments(argv)
    try:
        config: Config = load_config(args)
    except ConfigLoaderError as err:
        print("\nError: Failed to load configuration file.", file=sys.stderr)
        print(f"Details: {err}", file=sys.stderr)
        return 1

    setup_logging(config)

    try:
        engine = TranslationEngine(config)
    except (PhraseStoreError, LanguageRegistryError) as err:
        print(f"\nError: {err}", file=sys.stderr)
        return 1

    return asyncio.run(run(args, engine))


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.", file=sys.stderr)
        sys.exit(130)
