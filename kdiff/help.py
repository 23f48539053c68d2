"""The command's help text."""

from __future__ import annotations

import sys

from termcolor import colored


def help_text(prog: str) -> str:
    """Return the help message for a command invoked as ``prog``."""
    red, yellow, green, cyan, magenta = (
        lambda s, c=c: colored(s, c) for c in ("red", "yellow", "green", "cyan", "magenta")
    )
    lines = [
        "Kdiff - Compare pod resource requests/limits vs actual usage",
        "",
        "Usage:",
        f"  {prog} [flags]",
        "",
        "Flags:",
        "  -n string            The namespace to check (defaults to current context namespace)",
        "  -o string            Filter output to 'cpu' or 'memory'",
        "  --kubeconfig string  Path to kubeconfig file (default: $KUBECONFIG or ~/.kube/config)",
        "  --context string     The kubeconfig context to use",
        "  -m, --mode string    Mode: 'requests' (default) or 'limits'",
        "  -d                   Only show pods with usage over requests/limits",
        "  -a, -A               Check all namespaces",
        "  -i, --ignore-unset   Ignore pods without resource requests/limits set",
        "  -h                   Show this help message",
        "",
        "Color Customization:",
        f"  --color-{red('red')} float            Percentage threshold for red color",
        f"  --color-{yellow('yellow')} float         Percentage threshold for yellow color",
        f"  --color-{cyan('cyan')} float           Percentage threshold for cyan color",
        "",
        "Default Color Thresholds:",
        "  Requests Mode:",
        f"    {red('Red')}: above {0.0:.1f}% (over requests), {yellow('Yellow')}: {-20.0:.1f}% "
        f"(warning zone), {green('Green')}: well-utilized, {cyan('Cyan')}: below {-90.0:.1f}% "
        "(very under-utilized)",
        "  Limits Mode:",
        f"    {red('Red')}: above {-10.0:.1f}% (near limits), {yellow('Yellow')}: {-40.0:.1f}% "
        f"(warning zone), {green('Green')}: well-utilized, {cyan('Cyan')}: below {-80.0:.1f}% "
        "(very under-utilized)",
        "",
        "Examples:",
        "  # Check current namespace (requests mode)",
        f"  {prog}",
        "",
        "  # Check specific namespace with limits mode",
        f"  {prog} -n kube-system --mode limits",
        "",
        "  # Check all namespaces, only show CPU usage in limits mode",
        f"  {prog} -A -o cpu -m limits",
        "",
        "  # Show only pods exceeding requests, ignore pods without requests",
        f"  {prog} -d -i",
        "",
        "  # Customize color thresholds",
        f"  {prog} --mode limits --color-{red('red')} -5 --color-{yellow('yellow')} -30 "
        f"--color-{cyan('cyan')} -70",
        "",
        "Mode Differences:",
        "  Requests Mode: Compares usage against resource requests (what pods ask for)",
        "  Limits Mode:   Compares usage against resource limits (maximum allowed)",
        "                 Usually shows negative percentages since limits are typically higher",
        "",
        "Color Legend:",
        f"  {cyan('Cyan')}   - Very under-utilized",
        f"  {green('Green')}  - Well-utilized",
        f"  {yellow('Yellow')} - Warning zone",
        f"  {red('Red')}    - Over-utilized",
        f"  {magenta('Magenta')} - No resource requests/limits set (inf%)",
    ]
    return "\n".join(lines)


def show_help_menu(prog: str | None = None) -> None:
    """Print the help message to standard output."""
    print(help_text(sys.argv[0] if prog is None else prog))