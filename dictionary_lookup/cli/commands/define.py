"""CLI command for looking up a single word."""

from dictionary_lookup.config import load_config_from_env
from dictionary_lookup.interfaces import Transport
from dictionary_lookup.models import Failure, Suggestions
from dictionary_lookup.presenters import ConsolePresenter
from dictionary_lookup.services import LookupService, TransportClient


def define_command(args, presenter=None, transport: Transport | None = None) -> int:
    """Execute the define subcommand.

    Args:
        args: Parsed command-line arguments
        presenter: Presenter for output (ConsolePresenter by default)
        transport: Transport to use instead of the HTTPS client

    Returns:
        Exit code (0 = definitions shown, 2 = suggestions only, 1 = failure)
    """
    presenter = presenter or ConsolePresenter()

    term = " ".join(args.word).strip()
    if not term:
        presenter.show_error("Please provide a word to look up")
        return 1

    overrides = {}
    if args.timeout is not None:
        overrides["request_timeout"] = args.timeout
    config = load_config_from_env(**overrides)
    service = LookupService(transport or TransportClient(config))

    outcome = service.lookup(term)
    presenter.show_outcome(term, outcome)

    if isinstance(outcome, Failure):
        return 1
    if isinstance(outcome, Suggestions):
        return 2
    return 0
