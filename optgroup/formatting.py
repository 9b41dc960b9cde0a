"""
Default help rendering.

Consumes only the option model and the index snapshot of the current parse,
so integrators can swap it for their own renderer. Layout:

    <version>
    <header>
    <group title>
         -s, --long <VALUE>: description
    ...

Each prompt is right-aligned to the widest prompt; an option whose long name
does not reach it ungrouped is shown with its group qualifier.
"""
from rich.text import Text

from .coercion import label
from .index import Target


def prompt(option, index, /):
    """
    command-line spelling of one option: ' -s, --long <VALUE>'.
    """
    target = Target(option.group.name, option.name)
    short = index.short_of(target)
    text = " -%s, " % short if short else "     "
    if index.is_shadowed(target, option.long):
        text += "--%s:%s" % (option.group.long, option.long)
    else:
        text += "--%s" % option.long
    for tag in option.tags:
        text += " <%s>" % label(tag)
    return text


def _puts(text, line, style=""):
    # a line already ending in a newline is not given another one
    text.append(line, style)
    if not line.endswith("\n"):
        text.append("\n")


def render_help(groups, index, /, *, version=None, header=None, colorful=False):
    """
    build the help page as a rich Text (newline-terminated; print it with end="").

    parameters
    - groups: Mapping[str, Group] in declaration order.
    - index: Index of the current parse.
    - version, header: optional leading lines.
    - colorful: style titles and prompts.
    """
    prompts = {
        (group.name, option.name): prompt(option, index)
        for group in groups.values()
        for option in group
    }
    width = max(map(len, prompts.values()), default=1)

    text = Text()
    if version is not None:
        _puts(text, str(version))
    if header is not None:
        _puts(text, str(header))
    for group in groups.values():
        _puts(text, group.title, "bold" if colorful else "")
        for option in group:
            text.append(prompts[group.name, option.name].rjust(width), "cyan" if colorful else "")
            _puts(text, ": %s" % option.desc)
        _puts(text, "")
    return text


__all__ = (
    "prompt",
    "render_help",
)
