"""
Shell completion script generator.

The script is generated from the command tree, so new commands and flags
are completed without maintaining a template by hand.
"""

from __future__ import annotations

import argparse
from io import StringIO
from typing import Any

from ...app.tools import CommandNode, Tool, ToolConfig
from ...app.traceable import Traceable
from ..output import ConsoleOutput, OutputWriter

_BASH_HEADER = """\
# {name} bash completion
# Add to ~/.bashrc:
#   eval "$({name} completion bash)"

_{func}_completions() {{
    local cur="${{COMP_WORDS[COMP_CWORD]}}"
    local valued=" {valued} "
    local cmd="" word skip=0 i
    for ((i = 1; i < COMP_CWORD; i++)); do
        word="${{COMP_WORDS[i]}}"
        if ((skip)); then
            skip=0
            continue
        fi
        if [[ "$word" == -* ]]; then
            [[ "$valued" == *" $word "* ]] && skip=1
            continue
        fi
        cmd="${{cmd:+$cmd }}$word"
    done

    local commands="" flags=""
    case "$cmd" in
"""

_BASH_FOOTER = """\
    esac

    if [[ "$cur" == -* ]]; then
        COMPREPLY=($(compgen -W "$flags" -- "$cur"))
    elif [[ -n "$commands" ]]; then
        COMPREPLY=($(compgen -W "$commands" -- "$cur"))
    else
        COMPREPLY=($(compgen -d -- "$cur"))
    fi
}}

complete -F _{func}_completions {name}
"""


def _flag_names(node: CommandNode) -> list[str]:
    return [
        name
        for flags in (node.own_flags, node.inherited_flags)
        for action in flags
        if action.help is not argparse.SUPPRESS
        for name in action.option_strings
    ]


def _valued_flags(root: CommandNode) -> list[str]:
    """Flags that consume the following word."""
    names: set[str] = set()
    for node in root.walk():
        for action in node.own_flags:
            if action.nargs != 0:
                names.update(action.option_strings)
    return sorted(names)


def bash_completion(root: CommandNode) -> str:
    """Generate a bash completion script for a command tree."""
    name = root.name
    func = name.replace("-", "_")
    buf = StringIO()
    buf.write(_BASH_HEADER.format(name=name, func=func, valued=" ".join(_valued_flags(root))))
    for node in root.walk():
        if node.hidden:
            continue
        key = " ".join(node.path[1:])
        commands = " ".join(c.name for c in node.children if not c.hidden)
        buf.write(f'        "{key}")\n')
        buf.write(f'            commands="{commands}"\n')
        buf.write(f'            flags="{" ".join(_flag_names(node))}"\n')
        buf.write("            ;;\n")
    buf.write(_BASH_FOOTER.format(name=name, func=func))
    return buf.getvalue()


class CompletionTool(Tool):
    """Print a shell completion script for the whole command tree."""

    def __init__(
        self, parent: Traceable | None = None, out: OutputWriter | None = None
    ):
        config = ToolConfig(
            name="completion",
            help_text="Generate shell completion scripts",
            description=(
                "Generate a shell completion script. "
                'Load it with: eval "$(moddocs completion bash)"'
            ),
            hidden=True,
        )
        super().__init__(parent, config)
        self.out = out or ConsoleOutput()

    def add_args(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("shell", choices=["bash"], help="shell type")

    def run(self, **kwargs: Any) -> int:
        self.out.write(bash_completion(self.app.node()).rstrip("\n"))
        return 0
