"""
optgroup parser: the OptionGrouper facade.

What this class ties together
- the option model (groups created lazily by name, 'default' first),
- the resolution index, rebuilt on every parse so declarations added between
  calls are honoured,
- the scanner, which consumes the argument list and fills the result table,
- the policies governing each event, and the rich consoles used as sinks.

Quick start
    from optgroup import OptionGrouper, Kind

    parser = OptionGrouper(version="tool 1.0", on_not_argument="continue")
    general = parser.group()
    general.opt("verbose", "Talk more")
    net = parser.group("network", header="Network options")
    net.opt("port", "Port to bind", value=Kind.INTEGER, default=8080)

    args = ["--verbose", "--net:port=9000", "input.txt"]
    result = parser.parse(args)
    # result["default"]["verbose"] is True, result["network"]["port"] == 9000
    # args == ["input.txt"]

Built-in options
- default:help (-h) prints the help page then applies the after-help policy.
- default:version (only once a version is set) prints the version then
  applies the after-version policy.
"""
import sys

from rich.console import Console
from rich.text import Text

from .faults import FaultCode, HelpRequested, StopParsing, VersionRequested
from .formatting import render_help
from .index import build_index
from .model import DEFAULT, Group
from .policies import EXIT, Event, Policy, notify, react
from .scanner import Scanner
from .utils import Unset, coalesce, freeze

console = Console()
error_console = Console(stderr=True)


class OptionGrouper:
    """
    command-line parser with option groups.

    parameters (all keyword-only)
    - version: str | None
      program name and version; setting it adds the built-in --version option.
    - header: str | None
      text printed at the top of the help page.
    - on_help, on_version, on_invalid_parameter, on_ambiguous_parameter,
      on_not_argument: policy for each event (Policy, Action, action name or
      callable); all default to EXIT.
    - stdout, stderr: rich Consoles receiving help/version text and error
      messages respectively.
    - colorful: style help pages and error messages.
    """

    def __init__(
            self,
            *,
            version=None,
            header=None,
            on_help=EXIT,
            on_version=EXIT,
            on_invalid_parameter=EXIT,
            on_ambiguous_parameter=EXIT,
            on_not_argument=EXIT,
            stdout=Unset,
            stderr=Unset,
            colorful=False,
    ):
        self._groups = {}
        self._policies = {}
        self._version = None
        self._index = None
        self._result = {}

        self.header = header
        self.colorful = bool(colorful)
        self.stdout = coalesce(stdout, console)
        self.stderr = coalesce(stderr, error_console)

        self.on_help(on_help)
        self.on_version(on_version)
        self.on_invalid_parameter(on_invalid_parameter)
        self.on_ambiguous_parameter(on_ambiguous_parameter)
        self.on_not_argument(on_not_argument)

        general = self.group(DEFAULT, header="General options")
        general.opt("help", "Show this message", short="h", on=lambda _: self.show_help())

        if version is not None:
            self.version = version

    # --- configuration ---

    def group(self, name=DEFAULT, /, *, long=Unset, header=Unset):
        """
        return the group called `name`, creating it on first use.

        `long` and `header`, when given, update the group (created or existing).
        """
        try:
            group = self._groups[name]
        except KeyError:
            group = self._groups[name] = Group(name)
        if long is not Unset:
            group.long = str(long)
        if header is not Unset:
            group.header = header
        return group

    @property
    def groups(self):
        return freeze(self._groups)

    @property
    def version(self):
        return self._version

    @version.setter
    def version(self, version):
        self._version = version
        if "version" not in self.group(DEFAULT):
            self.group(DEFAULT).opt("version", "Show version", on=lambda _: self.show_version())

    def policy(self, event, /):
        return self._policies[event]

    def _configure(self, event, policy):
        self._policies[event] = Policy.of(policy)

    def on_help(self, policy, /):
        self._configure(Event.AFTER_HELP, policy)

    def on_version(self, policy, /):
        self._configure(Event.AFTER_VERSION, policy)

    def on_invalid_parameter(self, policy, /):
        self._configure(Event.INVALID_PARAMETER, policy)

    def on_ambiguous_parameter(self, policy, /):
        self._configure(Event.AMBIGUOUS_PARAMETER, policy)

    def on_not_argument(self, policy, /):
        self._configure(Event.NOT_ARGUMENT, policy)

    # --- parsing ---

    @property
    def index(self):
        """
        read-only index of the last parse (built on demand before the first one).
        """
        if self._index is None:
            self._index = build_index(self._groups)
        return self._index

    @property
    def result(self):
        """
        live result table of the last parse: {group: {option: value}}.
        """
        return self._result

    def parse(self, args=None, /):
        """
        parse `args` (default: a copy of sys.argv[1:]) and return the result table.

        behavior
        - the index and the result table are rebuilt first, so every group is
          present with its defaults.
        - matched tokens and consumed values are removed from `args`; ignored
          tokens are put back at its head, and '--' plus what follows is kept.
        - returns normally on completion or on a stop; faults under a RAISE
          policy, configuration errors and value errors propagate.
        """
        if args is None:
            args = sys.argv[1:]
        self._result = {}
        self._index = build_index(self._groups, result=self._result)
        Scanner(self._groups, self._index, self._result, self._report).run(args)
        return self._result

    def stop(self):
        """
        end the current parse (call it from an option callback or a policy callback).
        """
        raise StopParsing

    def _report(self, event, fault):
        fault = fault.__replace__(colorful=self.colorful)
        react(self._policies[event], fault, console=self.stderr)

    # --- informational output ---

    def format_help(self):
        """
        render the help page for the groups as currently declared.
        """
        return render_help(
            self._groups,
            build_index(self._groups),
            version=self._version,
            header=self.header,
            colorful=self.colorful,
        )

    def show_help(self):
        self.stdout.print(self.format_help(), end="", soft_wrap=True)
        notify(self._policies[Event.AFTER_HELP], HelpRequested(
            "help requested",
            code=FaultCode.HELP_REQUESTED,
        ))

    def show_version(self):
        self.stdout.print(Text(str(self._version)), soft_wrap=True)
        notify(self._policies[Event.AFTER_VERSION], VersionRequested(
            "version requested",
            code=FaultCode.VERSION_REQUESTED,
            version=self._version,
        ))

    def __repr__(self):
        return "OptionGrouper(groups=%r)" % list(self._groups)


__all__ = (
    "OptionGrouper",
)
