"""Boxed notices for the terminal, shown where a dialog would pop up."""

import sys

WARNING_ICON = "[!]"
INFO_ICON = "[i]"


def _render(title, text, is_warning):
    icon = WARNING_ICON if is_warning else INFO_ICON
    heading = f"{icon} {title}"
    body = str(text).splitlines() or [""]
    width = max(len(heading), *(len(line) for line in body))
    rule = "+" + "-" * (width + 2) + "+"
    lines = [
        rule,
        f"| {heading.ljust(width)} |",
        rule,
        *(f"| {line.ljust(width)} |" for line in body),
        rule,
    ]
    return "\n".join(lines) + "\n"


def show_styled_message(parent=None, title="", text="", is_warning=False):
    """Write a framed message with a title to ``parent`` and return what was written.

    ``parent`` is a text stream; standard output is used when it is None.
    Warnings carry ``WARNING_ICON``, other messages ``INFO_ICON``.
    """
    rendered = _render(title, text, is_warning)
    stream = sys.stdout if parent is None else parent
    stream.write(rendered)
    flush = getattr(stream, "flush", None)
    if flush is not None:
        flush()
    return rendered