"""Command line entry point: pick an action and run it against the
hardening anchor."""

import argparse
import sys

import pfhardening
from pfhardening import constants, lib
from pfhardening.hardening import Hardening

DESCRIPTION = """Install, reinstall or uninstall a hardened pf ruleset in the
'%s' anchor and wire it into %s.""" % (constants.ANCHOR_NAME, constants.PF_CONF)

PROMPT = "Please specify an action (%s) [Default: %%s]: " % ", ".join(
    constants.ACTIONS
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="pf-hardening",
        description=DESCRIPTION,
    )

    parser.add_argument(
        "action",
        nargs="?",
        default="",
        metavar="ACTION",
        help="one of %s; prompts when omitted" % ", ".join(constants.ACTIONS),
    )

    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        dest="DRY_RUN",
        help="print pfctl commands and file changes instead of performing them",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version="%%(prog)s: v%s" % pfhardening.__version__,
    )

    # Trailing arguments are ignored, only the first one names the action
    args, _ = parser.parse_known_args(argv)
    return args


def compute_default_action(installed: bool) -> str:
    if installed:
        return constants.ACTION_REINSTALL
    return constants.ACTION_INSTALL


def resolve_action(argument, default, prompt=input):
    """Action given on the command line, otherwise asked for; an empty
    answer picks the default"""
    if argument:
        return argument
    answer = prompt(PROMPT % default)
    return answer or default


def exit_status(returncode):
    """Exit status for a failed command: its own status, 128+N when it was
    killed by signal N, 1 when it never ran"""
    if returncode is None or returncode == 0:
        return 1
    if returncode < 0:
        return 128 - returncode
    return returncode


def dispatch(hardening, action, prog="pf-hardening"):
    """ Run the action, returns the exit status """
    if action == constants.ACTION_INSTALL:
        hardening.install()
    elif action == constants.ACTION_REINSTALL:
        hardening.reinstall()
    elif action == constants.ACTION_UNINSTALL:
        hardening.uninstall()
    else:
        print("Invalid action: %s" % action)
        print("Usage: %s {%s}" % (prog, "|".join(constants.ACTIONS)))
        return 1
    return 0


def main(argv=None, prompt=input, files=None):
    args = parse_args(argv)

    if not args.DRY_RUN and not lib.is_privileged():
        print("This script must be run as root.")
        return 1

    hardening = Hardening(files=files, dry_run=args.DRY_RUN)

    installed = hardening.is_installed()
    if installed:
        print("Custom pf rules are already installed.")
    else:
        print("No existing installation of custom pf rules detected.")
    default_action = compute_default_action(installed)

    try:
        action = resolve_action(args.action, default_action, prompt)
    except EOFError:
        print("No action given.", file=sys.stderr)
        return 1

    try:
        return dispatch(hardening, action)
    except lib.ExecutionFailed as e:
        print("Error: %s" % e, file=sys.stderr)
        return exit_status(e.returncode)
    except OSError as e:
        print("Error: %s" % e, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
