"""
Option model: groups and the options declared inside them.

A Group is a named, ordered collection of options sharing a help header and a
qualifying prefix (--group:option). Groups are created lazily by the parser and
re-opening one by name returns the same instance, so declarations can be
spread across several places:

    parser = OptionGrouper()
    bar = parser.group("bar", header="Bing")
    bar.opt("asd", "Asd asd", value=Kind.INTEGER)
    assert parser.group("bar") is bar

Nothing here validates; this module only assembles data. Conflicts are found
when the index is built at the start of every parse.
"""
import warnings

from .faults import FaultCode, RedefinedOptionWarning
from .utils import Unset, coalesce, hyphenate

DEFAULT = "default"


class Option:
    """
    one declared option.

    fields
    - group: Group that owns the option.
    - name: declaration name, the key in the result table.
    - desc: description shown on help pages.
    - long: command-line name without dashes (default: hyphenated name).
    - short: explicit one-character alias, or None.
    - no_short: when true, no short alias is generated automatically.
    - value: None, a value tag, or a list of value tags (one per value).
    - default: result value until the option is matched.
    - set: value stored when a valueless option is matched (default True).
    - on: callback invoked with the stored value after a match.
    """
    __slots__ = ("group", "name", "desc", "long", "short", "no_short", "value", "default", "set", "on")

    def __init__(
            self,
            group,
            name,
            desc,
            /,
            *,
            long=Unset,
            short=None,
            no_short=False,
            value=None,
            default=None,
            set=Unset,
            on=None,
    ):
        if on is not None and not callable(on):
            raise TypeError("option callback must be callable")
        self.group = group
        self.name = name
        self.desc = desc
        self.long = str(coalesce(long, hyphenate(name)))
        self.short = short
        self.no_short = bool(no_short)
        self.value = value
        self.default = default
        self.set = coalesce(set, True)
        self.on = on

    @property
    def multiple(self):
        return isinstance(self.value, list)

    @property
    def tags(self):
        """
        value tags as a tuple: () for valueless options, one tag per consumed token otherwise.
        """
        if self.value is None:
            return ()
        if self.multiple:
            return tuple(self.value)
        return (self.value,)

    def __repr__(self):
        return "Option(%s:%s)" % (self.group.name, self.name)


class Group:
    """
    named collection of options.

    `long` is the qualifier spelling (--long:option) and defaults to the
    hyphenated name; `header` is the optional help header.
    """

    def __init__(self, name, /, *, long=Unset, header=None):
        self.name = name
        self.long = str(coalesce(long, hyphenate(name)))
        self.header = header
        self.opts = {}

    @property
    def title(self):
        if self.header:
            return "%s (%s):" % (self.header, self.long)
        return "%s:" % self.long

    @property
    def default(self):
        return self.name == DEFAULT

    def opt(self, name, desc="", /, **options):
        """
        declare (or redeclare) an option in this group and return it.

        a redeclaration replaces the previous option; a RedefinedOptionWarning
        is emitted so that accidental overwrites remain visible.
        """
        if name in self.opts:
            warnings.warn(RedefinedOptionWarning(
                "option %r redefined in group %r" % (name, self.name),
                code=FaultCode.REDEFINED_OPTION,
                group=self.name,
                option=name,
            ), stacklevel=2)
        self.opts[name] = option = Option(self, name, desc, **options)
        return option

    def __getitem__(self, name):
        return self.opts[name]

    def __contains__(self, name):
        return name in self.opts

    def __iter__(self):
        return iter(self.opts.values())

    def __repr__(self):
        return "Group(%r, long=%r)" % (self.name, self.long)


__all__ = (
    "DEFAULT",
    "Option",
    "Group",
)
